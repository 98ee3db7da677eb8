"""
Logging setup for Pointmap.

All modules log through structlog (`get_logger(__name__)`) on top of the
stdlib root logger. Each HTTP request carries a request ID, kept in a
context variable and added to every event logged while it is handled.
"""

import base64
import logging
import re
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)

# Inbound IDs are echoed into logs and response headers
MAX_REQUEST_ID_LENGTH = 64
_REQUEST_ID_RE = re.compile(r"[A-Za-z0-9._:-]+")


class RequestContextFilter:
    """structlog processor adding the current request ID to each event."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        _ = logger, method_name

        request_id = request_id_ctx.get()
        if request_id:
            event_dict["request_id"] = request_id
        return event_dict


def _renderer(debug: bool) -> Any:
    if debug:
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.processors.JSONRenderer()


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog over stdlib logging.

    Args:
        debug: Render human-readable console output instead of JSON lines.
        level: Level name such as "INFO". Defaults to DEBUG when `debug` is
            set and INFO otherwise.
    """
    if level is None:
        log_level = logging.DEBUG if debug else logging.INFO
    else:
        log_level = logging.getLevelName(level.upper())
        if not isinstance(log_level, int):
            raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(level=log_level, stream=sys.stdout, format="%(message)s", force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            RequestContextFilter(),
            structlog.processors.TimeStamper(fmt="ISO", utc=True),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _renderer(debug),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Build a 14-character URL-safe ID from a microsecond clock and 2 random bytes."""
    raw = int(time.time() * 1_000_000).to_bytes(8, byteorder="big") + secrets.token_bytes(2)
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def is_valid_request_id(value: str) -> bool:
    """Whether a client-supplied request ID is short and header/log safe."""
    return len(value) <= MAX_REQUEST_ID_LENGTH and _REQUEST_ID_RE.fullmatch(value) is not None


def set_request_context(request_id: str | None = None) -> str:
    """Set the request ID for the current context and return it.

    A missing or malformed ID is replaced with a freshly generated one.
    """
    if request_id is None or not is_valid_request_id(request_id):
        request_id = generate_request_id()

    request_id_ctx.set(request_id)
    return request_id


def clear_request_context() -> None:
    request_id_ctx.set(None)


def get_request_id() -> str | None:
    return request_id_ctx.get()
