"""
tests/conftest.py

Shared stub collaborators and sample data. Keeps the tests free of real
terminals, clipboards and databases.
"""

import os
from datetime import datetime, timezone
from typing import List

import pytest

# Ensure an isolated environment: no .env surprises, no MongoDB.
os.environ.pop("MONGODB_URL", None)
os.environ.setdefault("LOG_FORMAT", "console")

from snipkeep.domain.entities.snippet import Snippet
from snipkeep.domain.interfaces.clipboard_interface import IClipboard
from snipkeep.domain.interfaces.renderer_interface import IRenderer
from snipkeep.errors import ClipboardError


class StubRenderer(IRenderer):
    """Deterministic renderer: wraps text in a fake ANSI style."""

    def __init__(self, style: str = "\x1b[1m"):
        self.style = style
        self.header_calls = []

    def render_header(self, snippet, language):
        self.header_calls.append((snippet.index, language.name))
        return [f"{self.style}{snippet.get_header()} [{language.name}]\x1b[0m"]

    def render_code(self, snippet):
        return [f"{self.style}{line}\x1b[0m" for line in snippet.code.splitlines(keepends=True)]


class RecordingClipboard(IClipboard):
    def __init__(self, fail_on: List[str] = ()):
        self.copied: List[str] = []
        self.attempts: List[str] = []
        self._fail_on = list(fail_on)

    def copy(self, text: str) -> None:
        self.attempts.append(text)
        if text in self._fail_on:
            raise ClipboardError()
        self.copied.append(text)


def make_snippet(index, description, language, tags=(), code="pass\n"):
    return Snippet(
        index=index,
        description=description,
        language=language,
        tags=list(tags),
        code=code,
        date=datetime(2024, 1, 2, tzinfo=timezone.utc),
        updated=datetime(2024, 1, 2, tzinfo=timezone.utc),
    )


@pytest.fixture
def stub_renderer():
    return StubRenderer()


@pytest.fixture
def renderer_factory():
    return StubRenderer


@pytest.fixture
def clipboard():
    return RecordingClipboard()


@pytest.fixture
def clipboard_factory():
    return RecordingClipboard


@pytest.fixture
def snippet_factory():
    return make_snippet


@pytest.fixture
def two_snippets():
    return [
        make_snippet(1, "reverse list", "python", ["list"], code="xs[::-1]\n"),
        make_snippet(2, "http server", "go", ["net"], code="http.ListenAndServe(\":8080\", nil)\n"),
    ]


@pytest.fixture
def five_snippets():
    return [
        make_snippet(i, f"snippet {i}", "python", [f"t{i}"], code=f"print({i})\n")
        for i in range(1, 6)
    ]
