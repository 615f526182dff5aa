"""Shared utilities for logging and diagnostics."""

from .logging import (
    LOGGER_NAME,
    JsonLogFormatter,
    configure_json_logger,
    flush_handlers,
    generate_trace_id,
    log_event,
)

__all__ = [
    "LOGGER_NAME",
    "JsonLogFormatter",
    "configure_json_logger",
    "flush_handlers",
    "generate_trace_id",
    "log_event",
]
