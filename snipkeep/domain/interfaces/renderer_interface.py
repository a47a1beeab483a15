from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from snipkeep.domain.entities.language import Language
from snipkeep.domain.entities.snippet import Snippet


class IRenderer(ABC):
    """Produces styled terminal lines for a snippet. Either call may raise."""

    @abstractmethod
    def render_header(self, snippet: Snippet, language: Language) -> List[str]:
        raise NotImplementedError

    @abstractmethod
    def render_code(self, snippet: Snippet) -> List[str]:
        raise NotImplementedError
