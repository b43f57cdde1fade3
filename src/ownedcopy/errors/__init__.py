"""Public error exports for ownedcopy."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    AuthError,
    ConflictError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidStateError,
    NetworkError,
    NotFoundError,
    OwnedCopyError,
    OwnerNotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    TraversalCycleError,
    is_fatal,
    map_http_error,
)

__all__ = [
    "OwnedCopyError",
    "InvalidStateError",
    "TraversalCycleError",
    "OwnerNotFoundError",
    "AuthError",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "is_fatal",
    "map_http_error",
]
