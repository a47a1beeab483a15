"""
Fuzzy matching for the interactive search window.

A candidate is visible when every (non-space) character of the query occurs
in its matchable text in order, case-insensitively. Visible candidates are
ranked with rapidfuzz's weighted ratio; ties keep ingestion order.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from rapidfuzz import fuzz, utils

from snipkeep.domain.entities.search_candidate import SearchCandidate


class FuzzyMatcher:
    def __init__(self, query: str) -> None:
        self.query = query or ""
        self._needle = "".join(self.query.lower().split())

    @property
    def is_empty(self) -> bool:
        return not self._needle

    def matches(self, text: str) -> bool:
        if not self._needle:
            return True
        haystack = iter((text or "").lower())
        return all(ch in haystack for ch in self._needle)

    def score(self, text: str) -> float:
        if not self.matches(text):
            return 0.0
        if not self._needle:
            return 100.0
        return float(fuzz.WRatio(self.query, text, processor=utils.default_process))

    def rank(self, candidates: Sequence[SearchCandidate]) -> List[SearchCandidate]:
        if self.is_empty:
            return list(candidates)
        scored: List[Tuple[float, int, SearchCandidate]] = []
        for position, candidate in enumerate(candidates):
            if self.matches(candidate.text):
                scored.append((self.score(candidate.text), position, candidate))
        scored.sort(key=lambda item: (-item[0], item[1]))
        return [candidate for _score, _pos, candidate in scored]
