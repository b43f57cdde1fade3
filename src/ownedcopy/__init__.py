"""ownedcopy public API."""

from __future__ import annotations

from ownedcopy.auth import AuthInfo, OAuthClient
from ownedcopy.controller import GoogleDriveController
from ownedcopy.errors import (
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
    map_http_error,
)
from ownedcopy.identity import is_owned_by, resolve_root_owner
from ownedcopy.manager import OwnedCopyManager
from ownedcopy.models import CopyFailure, CopyReport, Entry, Page, RunOptions
from ownedcopy.replicator import SubtreeReplicator
from ownedcopy.walker import OwnedItemWalker

__all__ = [
    # High-level
    "OwnedCopyManager",
    "OwnedItemWalker",
    "SubtreeReplicator",
    "GoogleDriveController",
    "resolve_root_owner",
    "is_owned_by",
    # Auth
    "AuthInfo",
    "OAuthClient",
    # Models
    "Entry",
    "Page",
    "RunOptions",
    "CopyReport",
    "CopyFailure",
    # Errors
    "OwnedCopyError",
    "OwnerNotFoundError",
    "TraversalCycleError",
    "InvalidStateError",
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
    "map_http_error",
]
