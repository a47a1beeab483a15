from __future__ import annotations

from dataclasses import dataclass

from snipkeep.domain.entities.snippet import Snippet


@dataclass(frozen=True, eq=False)
class SearchCandidate:
    """Session-scoped, read-only wrapper pairing a snippet with its rendered text.

    ``text`` is what the fuzzy matcher scores; ``text_highlight`` is the list
    line and ``code_highlight`` the preview pane. Both highlights may be empty
    when rendering failed.
    """

    snippet: Snippet
    text: str
    text_highlight: str = ""
    code_highlight: str = ""

    @property
    def index(self) -> int:
        return self.snippet.index
