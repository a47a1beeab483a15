import pytest

from snipkeep.config import load_config


def test_defaults(monkeypatch):
    monkeypatch.delenv("MONGODB_URL", raising=False)
    cfg = load_config()
    assert cfg.HIGHLIGHT_COLOR
    assert cfg.MONGODB_URL is None
    assert cfg.CLIPBOARD_TIMEOUT > 0


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("HIGHLIGHT_COLOR", "#101010")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.setenv("CLIPBOARD_COMMAND", "xclip -selection clipboard")
    cfg = load_config()
    assert cfg.HIGHLIGHT_COLOR == "#101010"
    assert cfg.LOG_FORMAT == "json"
    assert cfg.CLIPBOARD_COMMAND == "xclip -selection clipboard"


def test_invalid_mongodb_url_raises_value_error(monkeypatch):
    monkeypatch.setenv("MONGODB_URL", "http://example.com")
    with pytest.raises(ValueError):
        load_config()


def test_invalid_log_format_raises_value_error():
    with pytest.raises(ValueError):
        load_config(LOG_FORMAT="xml")
