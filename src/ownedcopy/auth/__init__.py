"""Public auth exports for ownedcopy."""

from __future__ import annotations

from .auth_info import AuthInfo
from .oauth_client import DEFAULT_SCOPES, OAuthClient

__all__ = ["AuthInfo", "OAuthClient", "DEFAULT_SCOPES"]
