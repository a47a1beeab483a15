"""
Interactive fuzzy search window built on Textual.

Layout (top to bottom, reverse mode): preview pane, query input, ranked
results, status line. Candidates arrive through a CandidateChannel consumed by
a thread worker; the list re-ranks on every keystroke.

Keys: type to filter, up/down to move, tab to toggle a mark, enter to
confirm, escape or ctrl+c to abort.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from rich.text import Text
from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Input, OptionList, Static
from textual.widgets.option_list import Option
from textual.worker import get_current_worker

from snipkeep.domain.entities.search_candidate import SearchCandidate
from snipkeep.domain.interfaces.search_engine_interface import ISearchEngine
from snipkeep.errors import SearchError, SnipKeepError
from snipkeep.infrastructure.search.candidate_channel import CandidateChannel
from snipkeep.infrastructure.search.fuzzy_matcher import FuzzyMatcher
from snipkeep.infrastructure.search.search_options import SearchOptions
from snipkeep.observability import emit_event

logger = logging.getLogger(__name__)

INGEST_BATCH_SIZE = 200
MARK = "▶ "
NO_MARK = "  "


def build_css(options: SearchOptions) -> str:
    return f"""
    Screen {{
        layout: vertical;
        height: {options.height_percent}%;
    }}
    #preview-pane {{
        height: {options.preview_percent}%;
        border: round $panel;
    }}
    #query {{
        height: 3;
    }}
    #results {{
        height: 1fr;
        border: none;
    }}
    #results > .option-list--option-highlighted {{
        background: {options.selection_background};
    }}
    #status {{
        height: 1;
        color: $text-muted;
    }}
    """


class SearchApp(App[List[SearchCandidate]]):
    """One search session. ``return_value`` holds the confirmed candidates."""

    BINDINGS = [
        Binding("escape", "abort", "Abort", priority=True),
        Binding("ctrl+c", "abort", "Abort", show=False, priority=True),
        Binding("enter", "confirm", "Confirm", priority=True),
        Binding("tab", "toggle_mark", "Select", priority=True),
        Binding("up", "cursor_up", show=False, priority=True),
        Binding("down", "cursor_down", show=False, priority=True),
    ]

    def __init__(self, channel: CandidateChannel, options: SearchOptions) -> None:
        super().__init__()
        self.CSS = build_css(options)
        self.options = options
        self._channel = channel
        self._candidates: List[SearchCandidate] = []
        self._visible: List[SearchCandidate] = []
        self._marked: List[SearchCandidate] = []
        self._query = ""
        self.input_complete = False

    # ---------- Layout ----------
    def compose(self) -> ComposeResult:
        preview = VerticalScroll(Static("", id="preview"), id="preview-pane")
        query = Input(placeholder="> ", id="query")
        results = OptionList(id="results")
        status = Static("", id="status")
        listing = [query, results] if self.options.reverse else [results, query]
        if self.options.preview_position == "up":
            yield preview
            yield from listing
        else:
            yield from listing
            yield preview
        yield status

    def on_mount(self) -> None:
        self.query_one("#query", Input).focus()
        self._ingest()

    # ---------- Ingestion ----------
    @work(thread=True, exclusive=True, group="ingest")
    def _ingest(self) -> None:
        worker = get_current_worker()
        batch: List[SearchCandidate] = []
        for candidate in self._channel:
            if worker.is_cancelled:
                return
            batch.append(candidate)
            if len(batch) >= INGEST_BATCH_SIZE:
                self.call_from_thread(self._add_candidates, batch)
                batch = []
        if not worker.is_cancelled:
            self.call_from_thread(self._add_candidates, batch, True)

    def _add_candidates(self, batch: Sequence[SearchCandidate], done: bool = False) -> None:
        self._candidates.extend(batch)
        if done:
            self.input_complete = True
        self._refilter(keep=self.highlighted_candidate)

    # ---------- Filtering / display ----------
    @property
    def visible_candidates(self) -> List[SearchCandidate]:
        return list(self._visible)

    @property
    def marked_candidates(self) -> List[SearchCandidate]:
        return list(self._marked)

    @property
    def highlighted_candidate(self) -> Optional[SearchCandidate]:
        index = self.query_one("#results", OptionList).highlighted
        if index is None or not 0 <= index < len(self._visible):
            return None
        return self._visible[index]

    def on_input_changed(self, event: Input.Changed) -> None:
        self._query = event.value
        self._refilter()

    def on_option_list_option_highlighted(self, event: OptionList.OptionHighlighted) -> None:
        self._show_preview()

    def _refilter(self, keep: Optional[SearchCandidate] = None) -> None:
        self._visible = FuzzyMatcher(self._query).rank(self._candidates)
        # Late batches must not yank the cursor away from what the user is on
        position = next((i for i, c in enumerate(self._visible) if c is keep), 0)
        self._render_results(highlight=position)

    def _render_results(self, highlight: Optional[int]) -> None:
        results = self.query_one("#results", OptionList)
        results.clear_options()
        results.add_options([Option(self._prompt(c)) for c in self._visible])
        if self._visible and highlight is not None:
            results.highlighted = min(highlight, len(self._visible) - 1)
        self._show_preview()
        self._update_status()

    def _prompt(self, candidate: SearchCandidate) -> Text:
        marker = MARK if self._is_marked(candidate) else NO_MARK
        line = Text(marker)
        # Rendering may have failed; fall back to the plain header.
        if candidate.text_highlight:
            line.append_text(Text.from_ansi(candidate.text_highlight))
        else:
            line.append(candidate.text)
        return line

    def _show_preview(self) -> None:
        candidate = self.highlighted_candidate
        preview = self.query_one("#preview", Static)
        if candidate is None or not candidate.code_highlight:
            preview.update("")
        else:
            preview.update(Text.from_ansi(candidate.code_highlight))

    def _update_status(self) -> None:
        status = f"{len(self._visible)}/{len(self._candidates)}"
        if self._marked:
            status += f" ({len(self._marked)})"
        if not self.input_complete:
            status += " …"
        self.query_one("#status", Static).update(status)

    def _is_marked(self, candidate: SearchCandidate) -> bool:
        return any(candidate is m for m in self._marked)

    # ---------- Actions ----------
    def action_cursor_up(self) -> None:
        self.query_one("#results", OptionList).action_cursor_up()

    def action_cursor_down(self) -> None:
        self.query_one("#results", OptionList).action_cursor_down()

    def action_toggle_mark(self) -> None:
        if not self.options.multi:
            return
        candidate = self.highlighted_candidate
        if candidate is None:
            return
        if self._is_marked(candidate):
            self._marked = [m for m in self._marked if m is not candidate]
        else:
            self._marked.append(candidate)
        position = self.query_one("#results", OptionList).highlighted or 0
        self._render_results(highlight=position + 1)

    def action_confirm(self) -> None:
        if self._marked:
            self.exit(list(self._marked))
            return
        candidate = self.highlighted_candidate
        self.exit([candidate] if candidate is not None else [])

    def action_abort(self) -> None:
        self.exit([])


AppFactory = Callable[[CandidateChannel, SearchOptions], App]


class TextualSearchEngine(ISearchEngine):
    """Runs one blocking SearchApp session per call.

    Textual owns the terminal for the duration of ``App.run`` and restores it
    on every exit path (confirm, abort, crash).
    """

    def __init__(self, app_factory: AppFactory = SearchApp) -> None:
        self._app_factory = app_factory

    def run(self, candidates: Sequence[SearchCandidate], highlight_color: str) -> List[SearchCandidate]:
        options = SearchOptions.build(highlight_color)
        channel = CandidateChannel()
        for candidate in candidates:
            channel.send(candidate)
        channel.close()

        try:
            app = self._app_factory(channel, options)
        except SnipKeepError:
            raise
        except Exception as exc:
            raise SearchError() from exc

        try:
            selected = app.run()
        except SnipKeepError:
            raise
        except Exception as exc:
            emit_event("search_session_crashed", severity="error", error=str(exc))
            raise SearchError() from exc

        if getattr(app, "return_code", 0) not in (0, None):
            emit_event("search_session_failed", severity="error", return_code=app.return_code)
            raise SearchError()
        logger.debug("search session returned %d item(s)", len(selected or []))
        return list(selected or [])
