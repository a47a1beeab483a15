from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

KIND_ALL = "all"
KIND_LANGUAGE = "language"
KIND_TAG = "tag"


@dataclass(frozen=True)
class SnippetQuery:
    """Which subset of the store a search session covers."""

    kind: str = KIND_ALL
    value: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind not in {KIND_ALL, KIND_LANGUAGE, KIND_TAG}:
            raise ValueError(f"unknown query kind: {self.kind!r}")
        if self.kind != KIND_ALL and not (self.value or "").strip():
            raise ValueError(f"{self.kind} filter requires a value")

    @classmethod
    def all(cls) -> "SnippetQuery":
        return cls()

    @classmethod
    def by_language(cls, language: str) -> "SnippetQuery":
        return cls(KIND_LANGUAGE, language)

    @classmethod
    def by_tag(cls, tag: str) -> "SnippetQuery":
        return cls(KIND_TAG, tag)
