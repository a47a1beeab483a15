"""
Terminal renderer for snippets.

Code bodies go through Pygments (256-color terminal formatter); headers are
composed with rich and exported as ANSI text so they can be embedded in the
search list.
"""

from __future__ import annotations

import logging
from typing import List

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound
from rich.console import Console
from rich.text import Text

from snipkeep.domain.entities.language import Language
from snipkeep.domain.entities.snippet import Snippet
from snipkeep.domain.interfaces.renderer_interface import IRenderer
from snipkeep.errors import ThemeError

logger = logging.getLogger(__name__)

HEADER_WIDTH = 10_000  # never wrap the list line


class PygmentsRenderer(IRenderer):
    def __init__(self, theme: str = "monokai") -> None:
        try:
            get_style_by_name(theme)
        except ClassNotFound as exc:
            raise ThemeError(theme) from exc
        self.theme = theme
        self._formatter = Terminal256Formatter(style=theme)

    def render_code(self, snippet: Snippet) -> List[str]:
        if not snippet.code:
            return []
        lexer = self._lexer_for(snippet.language)
        return highlight(snippet.code, lexer, self._formatter).splitlines(keepends=True)

    def render_header(self, snippet: Snippet, language: Language) -> List[str]:
        text = Text()
        text.append("■ ", style=language.color)
        text.append(f"#{snippet.index}. {snippet.description}", style="bold")
        text.append(" | ")
        # Same text as get_header(), so what is shown is what can be typed
        text.append(snippet.language, style=language.color)
        if snippet.tags:
            text.append(f" :{':'.join(snippet.tags)}:", style="italic")
        text.append(f"  {snippet.date:%Y-%m-%d}", style="dim")
        return [self._to_ansi(text)]

    def _lexer_for(self, language: str) -> Lexer:
        try:
            return get_lexer_by_name(language or "text", stripnl=False)
        except ClassNotFound:
            logger.debug("no lexer for %r, using plain text", language)
            return get_lexer_by_name("text", stripnl=False)

    @staticmethod
    def _to_ansi(text: Text) -> str:
        console = Console(
            force_terminal=True,
            color_system="truecolor",
            width=HEADER_WIDTH,
            highlight=False,
        )
        with console.capture() as capture:
            console.print(text, end="", soft_wrap=True)
        return capture.get()
