from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LANGUAGE_NAME = "text"
DEFAULT_LANGUAGE_COLOR = "#ffffff"


@dataclass(frozen=True)
class Language:
    """A named syntax profile used for highlighting and header colors."""

    name: str
    extension: str = ""
    color: str = DEFAULT_LANGUAGE_COLOR

    @classmethod
    def default(cls) -> "Language":
        """Profile substituted whenever a snippet's language is unknown."""
        return cls(name=DEFAULT_LANGUAGE_NAME, extension=".txt", color=DEFAULT_LANGUAGE_COLOR)
