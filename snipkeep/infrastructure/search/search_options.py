from __future__ import annotations

import re
from dataclasses import dataclass

from textual.color import Color, ColorParseError

from snipkeep.errors import SearchError

_PREVIEW_WINDOW_RE = re.compile(r"^(up|down):(\d{1,3})%$")
_HEIGHT_RE = re.compile(r"^(\d{1,3})%$")


@dataclass(frozen=True)
class SearchOptions:
    """Fixed search window layout; only the highlight color is configurable.

    Construction validates every option and raises SearchError, so a bad
    configuration never reaches the terminal.
    """

    color: str
    height: str = "100%"
    preview_window: str = "up:70%"
    multi: bool = True
    reverse: bool = True

    def __post_init__(self) -> None:
        height = _HEIGHT_RE.match(self.height or "")
        if not height or not 0 < int(height.group(1)) <= 100:
            raise SearchError(f"Search failed: invalid height {self.height!r}")
        preview = _PREVIEW_WINDOW_RE.match(self.preview_window or "")
        if not preview or not 0 < int(preview.group(2)) < 100:
            raise SearchError(f"Search failed: invalid preview window {self.preview_window!r}")
        prefix, _, value = (self.color or "").partition(":")
        if prefix != "bg+" or not value:
            raise SearchError(f"Search failed: invalid color option {self.color!r}")
        try:
            Color.parse(value)
        except (ColorParseError, ValueError, TypeError) as exc:
            raise SearchError(f"Search failed: invalid highlight color {value!r}") from exc

    @classmethod
    def build(cls, highlight_color: str) -> "SearchOptions":
        return cls(color=f"bg+:{(highlight_color or '').strip()}")

    @property
    def selection_background(self) -> str:
        return self.color.partition(":")[2]

    @property
    def height_percent(self) -> int:
        return int(self.height.rstrip("%"))

    @property
    def preview_position(self) -> str:
        return self.preview_window.split(":", 1)[0]

    @property
    def preview_percent(self) -> int:
        return int(self.preview_window.split(":", 1)[1].rstrip("%"))
