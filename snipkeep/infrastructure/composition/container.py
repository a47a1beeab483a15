from __future__ import annotations

import threading
from typing import Optional

from snipkeep.config import SnipKeepConfig, load_config

_search_service_singleton = None  # type: Optional["SnippetSearchService"]
_singleton_lock = threading.Lock()


def build_store(cfg: SnipKeepConfig):
    """MongoDB store when MONGODB_URL is configured, in-memory otherwise."""
    if cfg.MONGODB_URL:
        from pymongo import MongoClient

        from snipkeep.infrastructure.store.mongo_store import MongoSnippetStore

        client = MongoClient(
            cfg.MONGODB_URL,
            serverSelectionTimeoutMS=cfg.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            appname="snipkeep",
        )
        return MongoSnippetStore.from_database(client[cfg.DATABASE_NAME])

    from snipkeep.infrastructure.store.memory_store import InMemorySnippetStore

    return InMemorySnippetStore()


def get_search_service(cfg: Optional[SnipKeepConfig] = None, store=None):
    """
    Composition Root: build and return a singleton SnippetSearchService.
    Keeps construction inside infrastructure, so callers only depend on the application layer.
    """
    global _search_service_singleton
    if _search_service_singleton is not None:
        return _search_service_singleton

    with _singleton_lock:
        if _search_service_singleton is not None:
            return _search_service_singleton

        # Lazy imports keep textual/pygments out of import time for light callers
        from snipkeep.application.services.candidate_builder import CandidateBuilder
        from snipkeep.application.services.search_service import SnippetSearchService
        from snipkeep.application.services.selection_dispatcher import SelectionDispatcher
        from snipkeep.domain.services.language_registry import LanguageRegistry
        from snipkeep.infrastructure.clipboard.system_clipboard import SystemClipboard
        from snipkeep.infrastructure.rendering.pygments_renderer import PygmentsRenderer
        from snipkeep.infrastructure.search.textual_engine import TextualSearchEngine

        cfg = cfg or load_config()
        builder = CandidateBuilder(
            renderer=PygmentsRenderer(theme=cfg.HIGHLIGHT_THEME),
            registry=LanguageRegistry.builtin(),
        )
        dispatcher = SelectionDispatcher(
            clipboard=SystemClipboard(command=cfg.CLIPBOARD_COMMAND or None, timeout=cfg.CLIPBOARD_TIMEOUT),
        )
        _search_service_singleton = SnippetSearchService(
            store=store if store is not None else build_store(cfg),
            builder=builder,
            engine=TextualSearchEngine(),
            dispatcher=dispatcher,
            highlight_color=cfg.HIGHLIGHT_COLOR,
        )
        return _search_service_singleton


def reset_container() -> None:
    global _search_service_singleton
    with _singleton_lock:
        _search_service_singleton = None
