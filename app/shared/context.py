"""Request context management using contextvars.

Holds the current request id so log records emitted anywhere during the
request (repositories, cache, loader) can carry it.

Usage:
    token = set_request_id("abc123")
    ...
    reset_request_id(token)
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str | None) -> Token[str | None]:
    """Bind request_id to the current async task; returns the reset token."""
    return _request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    _request_id.reset(token)


def get_request_id() -> str | None:
    """Request id of the current request, or None outside a request."""
    return _request_id.get()
