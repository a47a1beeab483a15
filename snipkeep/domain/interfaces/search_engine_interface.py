from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from snipkeep.domain.entities.search_candidate import SearchCandidate


class ISearchEngine(ABC):
    """Interactive selection over a candidate set.

    ``run`` blocks until the user confirms or aborts. An abort returns an
    empty list. Raises SearchError when the session cannot be started.
    """

    @abstractmethod
    def run(self, candidates: Sequence[SearchCandidate], highlight_color: str) -> List[SearchCandidate]:
        raise NotImplementedError
