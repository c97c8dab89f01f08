"""
structlog setup for the Space Trips backend.

Every log line emitted while a request is being handled carries that
request's id and, once the caller is known, the user id.
"""

import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any

import structlog

from .config import settings

_request_id: ContextVar[str | None] = ContextVar("spacetrips_request_id", default=None)
_user_id: ContextVar[str | None] = ContextVar("spacetrips_user_id", default=None)

# Libraries that log every call at INFO
_CHATTY_LOGGERS = ("httpx", "httpcore", "aiosqlite")


def add_request_context(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor stamping the current request and user ids."""
    request_id = _request_id.get()
    if request_id:
        event_dict.setdefault("request_id", request_id)
    user_id = _user_id.get()
    if user_id:
        event_dict.setdefault("user_id", user_id)
    return event_dict


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        debug: Render colored console lines instead of JSON and log at DEBUG.
        level: Level name overriding ``settings.log_level`` when not in debug.
    """
    if debug:
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName((level or settings.log_level).upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    renderer: Any = (
        structlog.dev.ConsoleRenderer(colors=True) if debug else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_request_context,
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def new_request_id() -> str:
    return uuid.uuid4().hex[:16]


def set_request_context(request_id: str | None = None) -> str:
    """Start the log context for a request and return its id."""
    request_id = request_id or new_request_id()
    _request_id.set(request_id)
    _user_id.set(None)
    return request_id


def bind_user_id(user_id: str | None) -> None:
    """Attach the authenticated user to the current request's log context."""
    _user_id.set(user_id)


def current_request_id() -> str | None:
    return _request_id.get()


def clear_request_context() -> None:
    _request_id.set(None)
    _user_id.set(None)
