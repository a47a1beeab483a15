"""
Turns stored snippets into search candidates.

Rendering is a display concern: a failure for one snippet degrades that
snippet's highlights to empty strings and never drops it from the batch.
"""

from __future__ import annotations

from typing import Callable, List, Sequence

from snipkeep.domain.entities.search_candidate import SearchCandidate
from snipkeep.domain.entities.snippet import Snippet
from snipkeep.domain.interfaces.renderer_interface import IRenderer
from snipkeep.domain.services.language_registry import LanguageRegistry
from snipkeep.observability import emit_event


class CandidateBuilder:
    def __init__(self, renderer: IRenderer, registry: LanguageRegistry) -> None:
        self._renderer = renderer
        self._registry = registry

    def build(self, snippets: Sequence[Snippet]) -> List[SearchCandidate]:
        return [self.build_one(snippet) for snippet in snippets]

    def build_one(self, snippet: Snippet) -> SearchCandidate:
        snippet = snippet.copy()
        language = self._registry.resolve(snippet.language)
        return SearchCandidate(
            snippet=snippet,
            text=snippet.get_header(),
            text_highlight=self._render(
                "header", snippet, lambda: self._renderer.render_header(snippet, language)
            ),
            code_highlight=self._render(
                "code", snippet, lambda: self._renderer.render_code(snippet)
            ),
        )

    @staticmethod
    def _render(part: str, snippet: Snippet, render: Callable[[], Sequence[str]]) -> str:
        try:
            return "".join(render() or [])
        except Exception as e:
            emit_event(
                "render_failed",
                severity="warning",
                part=part,
                snippet_index=snippet.index,
                language=snippet.language,
                error=str(e),
            )
            return ""
