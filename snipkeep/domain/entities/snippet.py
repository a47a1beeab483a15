from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, List


def _dedupe_tags(tags: Iterable[str]) -> List[str]:
    seen = set()
    result: List[str] = []
    for tag in tags or []:
        text = str(tag).strip()
        if text and text not in seen:
            seen.add(text)
            result.append(text)
    return result


@dataclass
class Snippet:
    """Domain entity: a stored code fragment.

    Kept framework-free to allow use across layers. ``index`` is assigned by
    the store when the snippet is first saved (0 means "not stored yet").
    """

    description: str
    language: str
    code: str
    tags: List[str] = field(default_factory=list)
    index: int = 0
    date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        self.language = (self.language or "").strip().lower()
        self.tags = _dedupe_tags(self.tags)

    def get_header(self) -> str:
        """Plain, unstyled header: the text fuzzy search matches against."""
        header = f"#{self.index}. {self.description} | {self.language}"
        if self.tags:
            header += f" :{':'.join(self.tags)}:"
        return header

    def copy(self) -> "Snippet":
        return _copy.deepcopy(self)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags
