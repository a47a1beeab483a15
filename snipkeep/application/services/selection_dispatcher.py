from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from snipkeep.domain.entities.search_candidate import SearchCandidate
from snipkeep.domain.interfaces.clipboard_interface import IClipboard
from snipkeep.errors import ClipboardError, SnipKeepError
from snipkeep.observability import emit_event


class SelectionAction(Enum):
    """What happens to each candidate the user confirmed."""

    COPY_TO_CLIPBOARD = "copy_to_clipboard"


@dataclass
class ActionResult:
    index: int
    action: SelectionAction
    ok: bool
    output: str = ""
    error: Optional[SnipKeepError] = None


def _wrap(exc: Exception) -> SnipKeepError:
    error = ClipboardError(f"Couldn't copy to clipboard: {exc}")
    error.__cause__ = exc
    return error


class SelectionDispatcher:
    """Applies the post-selection action to every confirmed candidate.

    Actions are independent: a failure is recorded for that candidate only,
    the remaining candidates are still processed and nothing already done is
    rolled back.
    """

    def __init__(self, clipboard: IClipboard, action: SelectionAction = SelectionAction.COPY_TO_CLIPBOARD) -> None:
        self._clipboard = clipboard
        self.action = action

    def dispatch(self, candidates: Sequence[SearchCandidate]) -> List[ActionResult]:
        return [self.apply(candidate) for candidate in candidates]

    def apply(self, candidate: SearchCandidate) -> ActionResult:
        try:
            output = self._perform(candidate)
        except Exception as e:
            error = e if isinstance(e, SnipKeepError) else _wrap(e)
            emit_event(
                "selection_action_failed",
                severity="error",
                action=self.action.value,
                snippet_index=candidate.index,
                **error.to_fields(),
            )
            return ActionResult(index=candidate.index, action=self.action, ok=False, error=error)
        emit_event("selection_action_done", action=self.action.value, snippet_index=candidate.index)
        return ActionResult(index=candidate.index, action=self.action, ok=True, output=output)

    def _perform(self, candidate: SearchCandidate) -> str:
        if self.action is SelectionAction.COPY_TO_CLIPBOARD:
            self._clipboard.copy(candidate.snippet.code)
            return ""
        raise NotImplementedError(self.action)
