from __future__ import annotations

import threading
from collections import defaultdict
from datetime import datetime, timezone
from typing import Dict, List, Optional, Set

from snipkeep.domain.entities.snippet import Snippet
from snipkeep.domain.interfaces.snippet_store_interface import ISnippetStore
from snipkeep.errors import LanguageNotFound, SnippetNotFound, TagNotFound


class InMemorySnippetStore(ISnippetStore):
    """Process-local store with secondary indices by language and by tag.

    Records are copied on the way in and on the way out, so callers never hold
    a reference to the canonical snippet.
    """

    def __init__(self) -> None:
        self._records: Dict[int, Snippet] = {}
        self._by_language: Dict[str, Set[int]] = defaultdict(set)
        self._by_tag: Dict[str, Set[int]] = defaultdict(set)
        self._next_index = 1
        self._lock = threading.RLock()

    # ---------- Mutations ----------
    def add(self, snippet: Snippet) -> Snippet:
        with self._lock:
            record = snippet.copy()
            record.index = self._next_index
            self._next_index += 1
            self._records[record.index] = record
            self._index(record)
            return record.copy()

    def update(
        self,
        index: int,
        *,
        description: Optional[str] = None,
        language: Optional[str] = None,
        tags: Optional[List[str]] = None,
        code: Optional[str] = None,
    ) -> Snippet:
        with self._lock:
            current = self._require(index)
            self._unindex(current)
            updated = Snippet(
                index=current.index,
                description=current.description if description is None else description,
                language=current.language if language is None else language,
                tags=list(current.tags) if tags is None else list(tags),
                code=current.code if code is None else code,
                date=current.date,
                updated=datetime.now(timezone.utc),
            )
            self._records[index] = updated
            self._index(updated)
            return updated.copy()

    def delete(self, index: int) -> Snippet:
        with self._lock:
            record = self._require(index)
            self._unindex(record)
            del self._records[index]
            return record.copy()

    # ---------- Queries ----------
    def get(self, index: int) -> Snippet:
        with self._lock:
            return self._require(index).copy()

    def list_all(self) -> List[Snippet]:
        with self._lock:
            return [self._records[i].copy() for i in sorted(self._records)]

    def list_by_language(self, language: str) -> List[Snippet]:
        key = (language or "").strip().lower()
        with self._lock:
            indices = self._by_language.get(key)
            if not indices:
                raise LanguageNotFound(language)
            return [self._records[i].copy() for i in sorted(indices)]

    def list_by_tag(self, tag: str) -> List[Snippet]:
        with self._lock:
            indices = self._by_tag.get(tag)
            if not indices:
                raise TagNotFound(tag)
            return [self._records[i].copy() for i in sorted(indices)]

    def languages(self) -> List[str]:
        with self._lock:
            return sorted(k for k, v in self._by_language.items() if v)

    def tags(self) -> List[str]:
        with self._lock:
            return sorted(k for k, v in self._by_tag.items() if v)

    # ---------- Index helpers ----------
    def _require(self, index: int) -> Snippet:
        record = self._records.get(index)
        if record is None:
            raise SnippetNotFound(index)
        return record

    def _index(self, snippet: Snippet) -> None:
        self._by_language[snippet.language].add(snippet.index)
        for tag in snippet.tags:
            self._by_tag[tag].add(snippet.index)

    def _unindex(self, snippet: Snippet) -> None:
        self._by_language[snippet.language].discard(snippet.index)
        for tag in snippet.tags:
            self._by_tag[tag].discard(snippet.index)
