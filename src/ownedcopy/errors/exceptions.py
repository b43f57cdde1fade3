"""Exception hierarchy and HTTP error mapping for ownedcopy."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class OwnedCopyError(Exception):
    """
    Base exception for ownedcopy.

    Attributes:
        details: Optional structured information (e.g., HTTP status, file id).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidStateError(OwnedCopyError):
    """Raised when the store or the run reaches an inconsistent state."""


class TraversalCycleError(InvalidStateError):
    """Raised when a folder is rediscovered on its own recursion path."""


class OwnerNotFoundError(OwnedCopyError):
    """Raised when the root folder has no recorded owner."""


class AuthError(OwnedCopyError):
    """Raised when OAuth authentication/refresh fails."""


class PermissionError(OwnedCopyError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class InvalidArgumentError(OwnedCopyError):
    """Raised when request arguments are invalid (HTTP 400, etc.)."""


class NotFoundError(OwnedCopyError):
    """Raised when a Drive resource is not found (HTTP 404)."""


class ConflictError(OwnedCopyError):
    """Raised when a conflict occurs (HTTP 409/412)."""


class RateLimitError(OwnedCopyError):
    """Raised when rate-limited (HTTP 429)."""


class QuotaExceededError(OwnedCopyError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


class NetworkError(OwnedCopyError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(OwnedCopyError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to ownedcopy exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "rateLimitExceeded",
    "userRateLimitExceeded",
    "dailyLimitExceeded",
    "usageLimits",
    "storageQuotaExceeded",
)


_STATUS_ERRORS: dict[int, type[OwnedCopyError]] = {
    400: InvalidArgumentError,
    401: AuthError,
    403: PermissionError,
    404: NotFoundError,
    409: ConflictError,
    412: ConflictError,
    429: RateLimitError,
}


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    return any(key.lower() in reason.lower() for key in _QUOTA_REASON_KEYWORDS)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> OwnedCopyError:
    """
    Map an HTTP error to an ownedcopy exception.

    Policy:
        - 400 -> InvalidArgumentError
        - 401 -> AuthError
        - 403 -> PermissionError, or QuotaExceededError if quota-related
        - 404 -> NotFoundError
        - 409/412 -> ConflictError
        - 429 -> RateLimitError
        - anything else -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    error_cls = _STATUS_ERRORS.get(info.status_code, ApiError)
    if info.status_code == 403 and _is_quota_reason(info.reason):
        error_cls = QuotaExceededError
    return error_cls(message, details=details, cause=cause)


def is_fatal(exc: OwnedCopyError) -> bool:
    """Return True for errors that must abort the run even during a copy."""
    return isinstance(exc, (AuthError, InvalidStateError))
