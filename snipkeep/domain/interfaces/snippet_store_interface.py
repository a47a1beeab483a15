from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from snipkeep.domain.entities.snippet import Snippet


class ISnippetStore(ABC):
    """Store interface for the Snippet domain entity.

    Domain defines the contract; infrastructure implements it. The store owns
    the canonical records: every snippet it returns is a copy.
    """

    @abstractmethod
    def add(self, snippet: Snippet) -> Snippet:  # returns the stored copy with its new index
        raise NotImplementedError

    @abstractmethod
    def update(
        self,
        index: int,
        *,
        description: Optional[str] = None,
        language: Optional[str] = None,
        tags: Optional[List[str]] = None,
        code: Optional[str] = None,
    ) -> Snippet:
        raise NotImplementedError

    @abstractmethod
    def delete(self, index: int) -> Snippet:
        raise NotImplementedError

    @abstractmethod
    def get(self, index: int) -> Snippet:  # SnippetNotFound on miss
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> List[Snippet]:
        raise NotImplementedError

    @abstractmethod
    def list_by_language(self, language: str) -> List[Snippet]:  # LanguageNotFound on miss
        raise NotImplementedError

    @abstractmethod
    def list_by_tag(self, tag: str) -> List[Snippet]:  # TagNotFound on miss
        raise NotImplementedError

    @abstractmethod
    def languages(self) -> List[str]:
        raise NotImplementedError

    @abstractmethod
    def tags(self) -> List[str]:
        raise NotImplementedError
