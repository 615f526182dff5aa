"""JSON Lines event logging for the calculator CLI and service.

Every event is one JSON object per line carrying ``timestamp``, ``level``,
``logger``, ``event`` and ``trace_id`` plus the keyword fields passed to
:func:`log_event`. Until :func:`configure_json_logger` attaches a file the
``voxcalc`` logger only holds a :class:`logging.NullHandler`.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping
from uuid import uuid4

__all__ = [
    "LOGGER_NAME",
    "JsonLogFormatter",
    "configure_json_logger",
    "flush_handlers",
    "generate_trace_id",
    "log_event",
]

LOGGER_NAME = "voxcalc"

_CORE_KEYS = ("timestamp", "level", "logger", "event", "trace_id", "message")


def _utc_timestamp(created: float) -> str:
    stamp = datetime.fromtimestamp(created, tz=timezone.utc)
    return stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonLogFormatter(logging.Formatter):
    """Serialise a record and its event fields as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        entry: Dict[str, Any] = {
            "timestamp": _utc_timestamp(record.created),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": getattr(record, "event", None) or message,
        }
        trace_id = getattr(record, "trace_id", None)
        if trace_id:
            entry["trace_id"] = trace_id
        if message != entry["event"]:
            entry["message"] = message

        fields = getattr(record, "fields", None)
        if isinstance(fields, Mapping):
            for key, value in fields.items():
                # Event fields never shadow the envelope.
                if key not in _CORE_KEYS:
                    entry[key] = value

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, ensure_ascii=False, default=str)


def _drop_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _make_handler(log_path: Path | None) -> logging.Handler:
    if log_path is None:
        return logging.NullHandler()
    target = Path(log_path)
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(target, encoding="utf-8")
    handler.setFormatter(JsonLogFormatter())
    return handler


def configure_json_logger(log_path: Path | None, level: int = logging.INFO) -> logging.Logger:
    """(Re)attach the single handler of the ``voxcalc`` logger and return it."""

    logger = logging.getLogger(LOGGER_NAME)
    _drop_handlers(logger)

    handler = _make_handler(log_path)
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def flush_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


def generate_trace_id() -> str:
    """Return a random hex id correlating the events of one calculation."""

    return uuid4().hex


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    trace_id: str | None = None,
    level: int = logging.INFO,
    message: str | None = None,
    **fields: Any,
) -> str:
    """Log ``event`` with ``fields`` and return the trace id used.

    Disabled levels are skipped before the record is built.
    """

    trace_id = trace_id or generate_trace_id()
    if logger.isEnabledFor(level):
        logger.log(
            level,
            message or event,
            extra={"event": event, "trace_id": trace_id, "fields": fields},
        )
    return trace_id
