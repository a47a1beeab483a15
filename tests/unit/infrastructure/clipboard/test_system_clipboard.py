import subprocess
import types

import pytest

from snipkeep.errors import ClipboardError
from snipkeep.infrastructure.clipboard import system_clipboard as mod
from snipkeep.infrastructure.clipboard.system_clipboard import SystemClipboard


def _fake_run(calls, returncode=0, exc=None):
    def run(cmd, input=None, capture_output=False, timeout=None):
        calls.append((cmd, input, timeout))
        if exc is not None:
            raise exc
        return types.SimpleNamespace(returncode=returncode, stdout=b"", stderr=b"nope")

    return run


def test_explicit_command_receives_text(monkeypatch):
    calls = []
    monkeypatch.setattr(mod.subprocess, "run", _fake_run(calls))
    SystemClipboard(command="xclip -selection clipboard", timeout=2).copy("héllo")
    assert calls == [(["xclip", "-selection", "clipboard"], "héllo".encode("utf-8"), 2)]


def test_autodetects_first_available_tool(monkeypatch):
    monkeypatch.setattr(mod.shutil, "which", lambda name: "/usr/bin/wl-copy" if name == "wl-copy" else None)
    assert SystemClipboard().resolve_command() == ["wl-copy"]


def test_no_tool_available_raises(monkeypatch):
    monkeypatch.setattr(mod.shutil, "which", lambda name: None)
    with pytest.raises(ClipboardError):
        SystemClipboard().copy("x")


def test_nonzero_exit_raises(monkeypatch):
    monkeypatch.setattr(mod.subprocess, "run", _fake_run([], returncode=1))
    with pytest.raises(ClipboardError):
        SystemClipboard(command="pbcopy").copy("x")


@pytest.mark.parametrize(
    "exc",
    [subprocess.TimeoutExpired(cmd="pbcopy", timeout=1), FileNotFoundError("pbcopy")],
)
def test_subprocess_errors_are_wrapped(monkeypatch, exc):
    monkeypatch.setattr(mod.subprocess, "run", _fake_run([], exc=exc))
    with pytest.raises(ClipboardError) as info:
        SystemClipboard(command="pbcopy").copy("x")
    assert info.value.__cause__ is exc


def test_escaped_bytes_are_restored(monkeypatch):
    calls = []
    monkeypatch.setattr(mod.subprocess, "run", _fake_run(calls))
    SystemClipboard(command="pbcopy").copy("a\udcffb")
    assert calls[0][1] == b"a\xffb"


def test_lone_surrogate_becomes_clipboard_error(monkeypatch):
    calls = []
    monkeypatch.setattr(mod.subprocess, "run", _fake_run(calls))
    with pytest.raises(ClipboardError) as info:
        SystemClipboard(command="pbcopy").copy("x = '\ud800'")
    assert isinstance(info.value.__cause__, UnicodeEncodeError)
    assert calls == []
