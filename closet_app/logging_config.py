"""JSON logging with correlation ids and PII scrubbing.

Every log line is a single JSON object. Extra fields passed through
:func:`log_event` are scrubbed first: keys that carry user identity or
wardrobe free text are masked outright, and string values that look like an
email, a link or an inline image are replaced with a marker.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import sys
import time
import uuid
from typing import Any, Dict, Iterator, Pattern, Tuple

CORRELATION_ID: contextvars.ContextVar[str | None] = contextvars.ContextVar("correlation_id", default=None)

# Attributes every LogRecord carries; anything else on a record came from ``extra``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}

SENSITIVE_KEYS = frozenset(
    {
        "user_id",
        "email_or_phone",
        "identifier",
        "secret",
        "password",
        "avatar",
        "query",
        "content",
        "image",
        "image_base64",
        "image_url",
        "shop_link",
        "description",
    }
)
REDACTED = "[redacted]"

_EMAIL = re.compile(r"[\w.\-]+@[\w.\-]+")
_PREFIX_RULES: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"^data:", re.IGNORECASE), "[redacted-data-url]"),
    (re.compile(r"^https?://", re.IGNORECASE), "[redacted-url]"),
)


def _scrub_text(value: str) -> str:
    if _EMAIL.search(value):
        return _EMAIL.sub("[redacted-email]", value)
    for pattern, marker in _PREFIX_RULES:
        if pattern.match(value):
            return marker
    return value


def redact_for_log(payload: Any) -> Any:
    """Return a copy of ``payload`` that is safe to write to a log sink."""

    if payload is None or isinstance(payload, (bool, int, float)):
        return payload
    if isinstance(payload, str):
        return _scrub_text(payload)
    if isinstance(payload, dict):
        return {
            key: REDACTED if key in SENSITIVE_KEYS else redact_for_log(value)
            for key, value in payload.items()
        }
    if isinstance(payload, (list, tuple, set)):
        return [redact_for_log(item) for item in payload]
    return _scrub_text(str(payload))


class JsonFormatter(logging.Formatter):
    """Render a record as one JSON line."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        text = record.getMessage()
        entry: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": text,
            "event": getattr(record, "event", text),
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRIBUTES and key not in entry:
                entry[key] = redact_for_log(value)
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def configure_logging(level: int | str | None = None) -> None:
    """Send JSON lines to stderr at ``level`` (default ``$LOG_LEVEL`` or INFO)."""

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(JsonFormatter())
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level or os.getenv("LOG_LEVEL", "INFO"))


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Bind ``correlation_id`` (or keep the current one, or mint one) and return it."""

    if correlation_id:
        CORRELATION_ID.set(correlation_id)
        return correlation_id
    current = CORRELATION_ID.get()
    if current:
        return current
    minted = uuid.uuid4().hex
    CORRELATION_ID.set(minted)
    return minted


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Bind a correlation id for the duration of the block, then restore."""

    scoped = correlation_id or uuid.uuid4().hex
    token = CORRELATION_ID.set(scoped)
    try:
        yield scoped
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with scrubbed ``fields`` attached as structured data.

    Field names must not shadow LogRecord attributes such as ``name``,
    ``module`` or ``message``.
    """

    correlation_id = fields.pop("correlation_id", None) or ensure_correlation_id()
    exc_info = fields.pop("exc_info", None)
    extra = {"event": event, "correlation_id": correlation_id}
    extra.update(redact_for_log(fields))
    logger.log(level, event, exc_info=exc_info, extra=extra)


_OPERATIONS_LOGGER = logging.getLogger("closet_app.operations")


@contextlib.contextmanager
def operation_context(name: str, **attributes: Any) -> Iterator[str]:
    """Scope one named operation: nested operations share the caller's id."""

    inherited = attributes.pop("correlation_id", None) or CORRELATION_ID.get()
    with correlation_context(inherited) as scoped_id:
        started = time.perf_counter()
        log_event(
            _OPERATIONS_LOGGER, logging.DEBUG, "operation_started", operation=name, correlation_id=scoped_id, **attributes
        )
        yield scoped_id
        log_event(
            _OPERATIONS_LOGGER,
            logging.DEBUG,
            "operation_finished",
            operation=name,
            correlation_id=scoped_id,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )


__all__ = [
    "CORRELATION_ID",
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "redact_for_log",
    "operation_context",
]
