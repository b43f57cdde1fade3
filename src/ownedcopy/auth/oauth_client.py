"""OAuth credentials and Drive service construction for ownedcopy."""

from __future__ import annotations

import logging
import os
from typing import Sequence

from ownedcopy.errors import AuthError, InvalidArgumentError

from .auth_info import AuthInfo

logger = logging.getLogger(__name__)

DEFAULT_SCOPES: tuple[str, ...] = (
    "https://www.googleapis.com/auth/drive",
    "https://www.googleapis.com/auth/drive.metadata",
)


class OAuthClient:
    """Load, refresh or acquire OAuth credentials and build the Drive service."""

    def __init__(self, auth_info: AuthInfo) -> None:
        if auth_info.kind != "oauth":
            raise InvalidArgumentError("OAuthClient requires AuthInfo(kind='oauth')")
        self._auth_info = auth_info

    def get_credentials(self, scopes: Sequence[str], ensure_valid: bool = True):
        """
        Return OAuth credentials for the given scopes.

        A stored token is reused when valid, refreshed when expired, and the
        browser flow runs only when neither works. New or refreshed tokens are
        written back to `token_file`.

        Returns:
            google.oauth2.credentials.Credentials

        Raises:
            AuthError: on missing/unparsable credential material or flow failure.
            InvalidArgumentError: if scopes is invalid.
        """
        if not scopes or not all(isinstance(s, str) and s.strip() for s in scopes):
            raise InvalidArgumentError("scopes must be a non-empty sequence of strings")

        scope_list = list(scopes)
        creds = self._load_stored_token(scope_list)
        if creds is not None:
            if not ensure_valid or self._ensure_fresh(creds):
                return creds

        creds = self._authorize(scope_list)
        self._save_credentials(creds)
        logger.info("Token stored to %s", self._auth_info.token_file)
        return creds

    def _load_stored_token(self, scopes: list[str]):
        from google.oauth2.credentials import Credentials

        token_file = self._auth_info.token_file
        if not os.path.exists(token_file):
            return None
        try:
            return Credentials.from_authorized_user_file(token_file, scopes=scopes)
        except Exception as exc:
            raise AuthError(
                "Stored OAuth token is unreadable",
                details={"token_file": token_file},
                cause=exc,
            ) from exc

    def _ensure_fresh(self, creds) -> bool:
        """Refresh an expired token in place; False when a new grant is needed."""
        if creds.valid:
            return True
        if not creds.refresh_token:
            return False

        from google.auth.transport.requests import Request

        logger.debug("Refreshing OAuth token from %s", self._auth_info.token_file)
        try:
            creds.refresh(Request())
        except Exception as exc:
            raise AuthError(
                "OAuth token refresh was rejected",
                details={"token_file": self._auth_info.token_file},
                cause=exc,
            ) from exc
        self._save_credentials(creds)
        return bool(creds.valid)

    def _authorize(self, scopes: list[str]):
        from google_auth_oauthlib.flow import InstalledAppFlow

        client_secrets = self._auth_info.client_secrets_file
        if not os.path.exists(client_secrets):
            raise AuthError(
                "OAuth client secrets file not found",
                details={"client_secrets_file": client_secrets},
            )

        logger.info("No usable token; starting OAuth authorization flow")
        try:
            flow = InstalledAppFlow.from_client_secrets_file(client_secrets, scopes=scopes)
            return flow.run_local_server(port=0)
        except Exception as exc:
            raise AuthError(
                "OAuth authorization flow failed",
                details={"client_secrets_file": client_secrets},
                cause=exc,
            ) from exc

    def build_drive_service(self, scopes: Sequence[str], ensure_valid: bool = True):
        """
        Build a Drive v3 service resource.

        Returns:
            googleapiclient.discovery.Resource
        """
        from googleapiclient.discovery import build

        creds = self.get_credentials(scopes=scopes, ensure_valid=ensure_valid)
        try:
            return build("drive", "v3", credentials=creds, cache_discovery=False)
        except Exception as exc:
            raise AuthError("Failed to build Drive service", cause=exc) from exc

    def _save_credentials(self, creds) -> None:
        token_file = self._auth_info.token_file
        token_dir = os.path.dirname(token_file)
        if token_dir:
            os.makedirs(token_dir, exist_ok=True)

        try:
            with open(token_file, "w", encoding="utf-8") as f:
                f.write(creds.to_json())
        except OSError as exc:
            raise AuthError(
                "Failed to save OAuth token file",
                details={"token_file": token_file},
                cause=exc,
            ) from exc
