"""Structured logging context for budget operations."""

import logging
import threading
from typing import Any, Dict, Optional

# Thread-local storage for log context
_thread_local = threading.local()


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields currently added to log records."""
    return dict(getattr(_thread_local, "context", {}))


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields are kept in thread-local storage and copied onto every record
    that passes a handler carrying ``ContextFilter``. Nested contexts merge
    their fields; leaving a context restores the outer fields.

    Example:
        with LogContext(budget_id=12, user="jane"):
            logger.info("Approving budget")
            # Record carries budget_id and user fields
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self.previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self) -> "LogContext":
        self.previous_context = get_log_context()
        _thread_local.context = {**self.previous_context, **self.fields}
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _thread_local.context = self.previous_context or {}


class ContextFilter(logging.Filter):
    """Logging filter that copies LogContext fields onto log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in get_log_context().items():
            setattr(record, key, value)
        return True
