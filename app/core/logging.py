"""Structured JSON logging with a correlation ID per request and the acting user.

The trace-id middleware opens a context for each HTTP request; the auth
dependency attaches the authenticated user to it. Every record emitted while
that request is handled carries both, so one listing's payment, moderation
and view events can be followed across log lines.
"""
import logging
import json
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Optional

from app.config import settings

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")
actor_id_var: ContextVar[str] = ContextVar("actor_id", default="")

# Domain fields services pass through `extra=`
_EXTRA_KEYS = (
    "property_id",
    "owner_id",
    "user_id",
    "status",
    "method",
    "path",
    "status_code",
    "duration_ms",
)


def set_correlation_id(request_id: str | None = None) -> str:
    """Start a request context: set the correlation ID and forget the previous actor."""
    cid = request_id or str(uuid.uuid4())
    correlation_id_var.set(cid)
    actor_id_var.set("")
    return cid


def set_actor(user_id: Optional[Any]) -> None:
    """Attach the authenticated user to the current request context."""
    actor_id_var.set(str(user_id) if user_id else "")


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        cid = correlation_id_var.get("")
        if cid:
            log_entry["correlation_id"] = cid
        actor = actor_id_var.get("")
        if actor:
            log_entry["actor_id"] = actor

        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key in _EXTRA_KEYS:
            if hasattr(record, key):
                value = getattr(record, key)
                # UUIDs, Decimals and enums are not JSON-native
                log_entry[key] = value if isinstance(value, (int, float)) else str(value)

        return json.dumps(log_entry, ensure_ascii=False)


def setup_logging() -> None:
    """Configure application-wide logging."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    root_logger.addHandler(handler)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.WARNING)
    # request lines come from the trace-id middleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger."""
    return logging.getLogger(name)
