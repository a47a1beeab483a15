"""
Structured logging and correlation IDs.

- structlog configuration with JSON/console rendering
- session_id binding via contextvars (one id per search session)
- sensitive data redaction
"""
from __future__ import annotations

import logging
import os
import sys
import uuid
from typing import Any, Dict

import structlog

SCHEMA_VERSION = "1.0"


def _redact_sensitive(logger, method, event_dict: Dict[str, Any]):
    sensitive_keys = {"token", "password", "secret", "authorization", "mongodb_url"}
    for key in list(event_dict.keys()):
        if any(s in str(key).lower() for s in sensitive_keys):
            event_dict[key] = "[REDACTED]"
    return event_dict


def _add_schema_version(logger, method, event_dict: Dict[str, Any]):
    event_dict.setdefault("schema_version", SCHEMA_VERSION)
    return event_dict


def _choose_renderer(fmt: str | None = None):
    debug = str(os.getenv("DEBUG", "")).lower() in {"1", "true", "yes"}
    fmt = (fmt or os.getenv("LOG_FORMAT") or "").lower().strip()
    if debug or fmt == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def setup_structlog_logging(min_level: str | int = "INFO", fmt: str | None = None) -> None:
    level = logging.getLevelName(min_level.upper()) if isinstance(min_level, str) else int(min_level)
    if not isinstance(level, int):
        level = logging.INFO

    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, handlers=[logging.StreamHandler()])
    else:
        logging.getLogger().setLevel(level)

    # Logs go to stderr: stdout belongs to the search UI while a session runs.
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            _redact_sensitive,
            _add_schema_version,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _choose_renderer(fmt),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def generate_session_id() -> str:
    return str(uuid.uuid4())[:8]


def bind_session_id(session_id: str | None = None) -> str:
    sid = session_id or generate_session_id()
    structlog.contextvars.bind_contextvars(session_id=sid)
    return sid


def clear_session_context() -> None:
    structlog.contextvars.unbind_contextvars("session_id")


def emit_event(event: str, severity: str = "info", **fields: Any) -> None:
    logger = structlog.get_logger()
    fields.pop("event", None)
    if severity in {"error", "critical"}:
        logger.error(event, **fields)
    elif severity in {"warn", "warning"}:
        logger.warning(event, **fields)
    elif severity == "debug":
        logger.debug(event, **fields)
    else:
        logger.info(event, **fields)
