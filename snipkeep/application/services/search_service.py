from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from snipkeep.application.dto.snippet_query_dto import KIND_LANGUAGE, KIND_TAG, SnippetQuery
from snipkeep.application.services.candidate_builder import CandidateBuilder
from snipkeep.application.services.selection_dispatcher import ActionResult, SelectionDispatcher
from snipkeep.domain.entities.snippet import Snippet
from snipkeep.domain.interfaces.search_engine_interface import ISearchEngine
from snipkeep.domain.interfaces.snippet_store_interface import ISnippetStore
from snipkeep.observability import bind_session_id, clear_session_context, emit_event


@dataclass
class SearchOutcome:
    selected: List[Snippet] = field(default_factory=list)
    results: List[ActionResult] = field(default_factory=list)

    @property
    def failures(self) -> List[ActionResult]:
        return [r for r in self.results if not r.ok]

    @property
    def ok(self) -> bool:
        return not self.failures


class SnippetSearchService:
    """Application service: gather snippets, run the session, act on the selection.

    Thin orchestration over the builder, engine and dispatcher. Store lookup
    errors and SearchError propagate to the caller; an aborted session is an
    empty outcome.
    """

    def __init__(
        self,
        store: ISnippetStore,
        builder: CandidateBuilder,
        engine: ISearchEngine,
        dispatcher: SelectionDispatcher,
        highlight_color: str,
    ) -> None:
        self._store = store
        self._builder = builder
        self._engine = engine
        self._dispatcher = dispatcher
        self._highlight_color = highlight_color

    def gather(self, query: SnippetQuery) -> List[Snippet]:
        if query.kind == KIND_LANGUAGE:
            return self._store.list_by_language(query.value or "")
        if query.kind == KIND_TAG:
            return self._store.list_by_tag(query.value or "")
        return self._store.list_all()

    def search_store(self, query: Optional[SnippetQuery] = None, highlight_color: Optional[str] = None) -> SearchOutcome:
        snippets = self.gather(query or SnippetQuery.all())
        return self.search(snippets, highlight_color)

    def search(self, snippets: Sequence[Snippet], highlight_color: Optional[str] = None) -> SearchOutcome:
        color = highlight_color or self._highlight_color
        bind_session_id()
        try:
            candidates = self._builder.build(snippets)
            emit_event("search_started", candidates=len(candidates))
            chosen = self._engine.run(candidates, color)
            if not chosen:
                emit_event("search_nothing_chosen")
                return SearchOutcome()
            results = self._dispatcher.dispatch(chosen)
            emit_event(
                "search_finished",
                selected=len(chosen),
                failed=sum(1 for r in results if not r.ok),
            )
            return SearchOutcome(selected=[c.snippet for c in chosen], results=results)
        finally:
            clear_session_context()
