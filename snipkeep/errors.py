"""
Error taxonomy for snipkeep.

Every error carries a ``kind`` (stable identifier for callers and logs) and a
human message. Errors raised by third-party libraries are wrapped at the
adapter boundary with ``raise ... from exc``.
"""

from __future__ import annotations

from typing import Any, Dict


class SnipKeepError(Exception):
    """Base class: kind + contextual message."""

    kind = "snipkeep_error"
    message = "Something went wrong."

    def __init__(self, message: str | None = None, **context: Any) -> None:
        self.context: Dict[str, Any] = dict(context)
        text = message if message is not None else self.message.format(**self.context)
        super().__init__(text)

    def to_fields(self) -> Dict[str, Any]:
        """Flatten into log fields (used with emit_event)."""
        fields: Dict[str, Any] = {"error_code": self.kind, "error": str(self)}
        fields.update({k: v for k, v in self.context.items() if v is not None})
        return fields


class LanguageNotFound(SnipKeepError):
    """Thrown when trying to access an unrecorded language."""

    kind = "language_not_found"
    message = "I don't know what {language!r} is."

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(language=language)


class SnippetNotFound(SnipKeepError):
    """Thrown when trying to access a nonexistent snippet index."""

    kind = "snippet_not_found"
    message = "You haven't written that snippet: {index!r}."

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(index=index)


class TagNotFound(SnipKeepError):
    """Thrown when trying to access an unrecorded tag."""

    kind = "tag_not_found"
    message = "You haven't tagged anything as {tag!r} yet."

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(tag=tag)


class EditorError(SnipKeepError):
    kind = "editor_error"
    message = "Your editor of choice didn't work."


class DoingNothing(SnipKeepError):
    """Explicit confirmation was not received for a destructive action."""

    kind = "doing_nothing"
    message = "{reason}\nDoing nothing."

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason=reason)


class Homeless(SnipKeepError):
    kind = "homeless"
    message = "$HOME not set"


class ThemeError(SnipKeepError):
    kind = "theme_error"
    message = "I don't have the {theme!r} theme."

    def __init__(self, theme: str) -> None:
        self.theme = theme
        super().__init__(theme=theme)


class ClipboardError(SnipKeepError):
    kind = "clipboard_error"
    message = "Couldn't copy to clipboard"


class SearchError(SnipKeepError):
    kind = "search_error"
    message = "Search failed"


class OutOfCheeseError(SnipKeepError):
    """Catch-all for stuff that should never happen."""

    kind = "out_of_cheese"
    message = "{reason}\nRedo from start."

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason=reason)
