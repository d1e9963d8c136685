"""
Normalized failure categories for vendor calls.

Every exception escaping a Gallery round-trip is mapped onto an ``ErrorCode``
so the retry policy can decide whether another attempt is worthwhile. Values
are lowercase snake_case and appear verbatim in ``retry.attempt`` log events.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional


class ErrorCode(str, Enum):
    """Failure category of a vendor call."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    UNSUPPORTED = "unsupported"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"

    @property
    def retryable(self) -> bool:
        """Whether a failure of this category is worth retrying by default."""
        return self in RETRYABLE_CODES

    @classmethod
    def from_http_status(cls, status: int) -> Optional["ErrorCode"]:
        """Return the category for an HTTP status, or ``None`` if unmapped."""
        return _HTTP_STATUS_MAP.get(status)


RETRYABLE_CODES = frozenset(
    {
        ErrorCode.TRANSIENT,
        ErrorCode.RATE_LIMIT,
        ErrorCode.TIMEOUT,
        ErrorCode.UNAVAILABLE,
    }
)

_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


__all__ = ["ErrorCode", "RETRYABLE_CODES"]
