"""Shared helpers: request context, telemetry and datetime utilities.

No business logic; used by every other layer.
"""

from app.shared.context import get_request_id, reset_request_id, set_request_id
from app.shared.utils import ensure_utc, utc_now

__all__ = [
    "get_request_id",
    "set_request_id",
    "reset_request_id",
    "utc_now",
    "ensure_utc",
]
