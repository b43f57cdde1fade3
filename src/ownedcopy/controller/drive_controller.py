"""Google Drive API controller: the remote store used by the copy run."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, TypeVar

from ownedcopy.auth import DEFAULT_SCOPES, AuthInfo, OAuthClient
from ownedcopy.errors import (
    ApiError,
    HttpErrorInfo,
    InvalidArgumentError,
    NetworkError,
    RateLimitError,
    map_http_error,
)
from ownedcopy.models import MAX_PAGE_SIZE, Entry, Page, RunOptions
from ownedcopy.util.mime import FOLDER_MIME

from .fields import CREATED_FIELDS, ENTRY_FIELDS, LIST_FIELDS

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _RetryPolicy:
    max_retries: int = 0
    initial_delay_sec: float = 1.0


class GoogleDriveController:
    """
    Drive API controller.

    Notes:
        - The Drive `service` object is NOT exposed.
        - `supports_all_drives` is applied to all requests consistently.
        - Every call is attempted once unless the retry policy allows more.
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
        options: Optional[RunOptions] = None,
    ) -> None:
        opts = options or RunOptions()
        self._supports_all_drives = opts.supports_all_drives
        self._retry_policy = _retry_policy_from(opts)

        use_scopes = list(scopes) if scopes is not None else list(DEFAULT_SCOPES)
        client = OAuthClient(auth_info)
        self._service = client.build_drive_service(use_scopes, ensure_valid=True)

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        options: Optional[RunOptions] = None,
    ) -> "GoogleDriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        opts = options or RunOptions()
        obj = cls.__new__(cls)
        obj._supports_all_drives = opts.supports_all_drives
        obj._retry_policy = _retry_policy_from(opts)
        obj._service = service
        return obj

    # ----------------------------
    # Public API
    # ----------------------------
    def get(self, file_id: str) -> Entry:
        req = self._service.files().get(
            fileId=file_id,
            fields=ENTRY_FIELDS,
            **self._common_get_kwargs(),
        )
        data = self._execute(req.execute)
        return _file_dict_to_entry(data)

    def get_owners(self, file_id: str) -> tuple[str, ...]:
        """Owner emails of an item, primary owner first."""
        return self.get(file_id).owners

    def list_page(
        self,
        parent_id: str,
        *,
        page_token: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> Page:
        """Fetch one page of non-trashed direct children of parent_id."""
        if page_size is not None and not 1 <= page_size <= MAX_PAGE_SIZE:
            raise InvalidArgumentError(
                "page_size out of range",
                details={"page_size": page_size},
            )

        kwargs = self._common_list_kwargs()
        if page_size is not None:
            kwargs["pageSize"] = page_size

        req = self._service.files().list(
            q=_build_parent_query(parent_id),
            fields=LIST_FIELDS,
            pageToken=page_token,
            **kwargs,
        )
        data = self._execute(req.execute)
        entries = tuple(_file_dict_to_entry(f) for f in data.get("files", []) or [])

        next_token = data.get("nextPageToken")
        return Page(
            entries=entries,
            next_page_token=next_token if isinstance(next_token, str) and next_token else None,
        )

    def create_folder(self, name: str, parent_id: str) -> Entry:
        body = {"name": name, "mimeType": FOLDER_MIME, "parents": [parent_id]}
        req = self._service.files().create(
            body=body,
            fields=CREATED_FIELDS,
            **self._common_write_kwargs(),
        )
        data = self._execute(req.execute)
        return _file_dict_to_entry(data)

    def copy(
        self,
        file_id: str,
        new_parent_id: str,
        *,
        new_name: Optional[str] = None,
    ) -> Entry:
        body: dict[str, Any] = {"parents": [new_parent_id]}
        if new_name is not None:
            body["name"] = new_name

        req = self._service.files().copy(
            fileId=file_id,
            body=body,
            fields=CREATED_FIELDS,
            **self._common_write_kwargs(),
        )
        data = self._execute(req.execute)
        return _file_dict_to_entry(data)

    # ----------------------------
    # Internals
    # ----------------------------
    def _common_get_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _common_list_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True, "includeItemsFromAllDrives": True}

    def _common_write_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _execute(self, func: Callable[[], T]) -> T:
        delay = self._retry_policy.initial_delay_sec
        for attempt in range(self._retry_policy.max_retries + 1):
            try:
                return func()
            except Exception as exc:
                mapped = self._map_exception(exc)
                if self._should_retry(mapped) and attempt < self._retry_policy.max_retries:
                    logger.warning(
                        "Drive request failed (%s); retrying in %.1fs",
                        mapped.__class__.__name__,
                        delay,
                    )
                    time.sleep(delay)
                    delay *= 2
                    continue
                raise mapped from exc

        raise ApiError("Unexpected retry loop termination")

    def _should_retry(self, exc: Exception) -> bool:
        if isinstance(exc, (RateLimitError, NetworkError)):
            return True
        if isinstance(exc, ApiError):
            status_code = getattr(exc, "details", {}).get("status_code")
            return isinstance(status_code, int) and 500 <= status_code <= 599
        return False

    def _map_exception(self, exc: Exception) -> Exception:
        from googleapiclient.errors import HttpError

        if isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        if isinstance(exc, (OSError, TimeoutError)):
            return NetworkError("Network error", cause=exc)

        return ApiError("Drive API error", cause=exc)


def _retry_policy_from(options: RunOptions) -> _RetryPolicy:
    return _RetryPolicy(
        max_retries=options.max_retries,
        initial_delay_sec=options.initial_retry_delay_sec,
    )


def _build_parent_query(parent_id: str) -> str:
    escaped = parent_id.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}' in parents and trashed=false"


def _file_dict_to_entry(data: dict[str, Any]) -> Entry:
    file_id = data.get("id")
    name = data.get("name", "")
    mime_type = data.get("mimeType", "")
    parents = data.get("parents", []) or []

    owners: list[str] = []
    for owner in data.get("owners", []) or []:
        email = owner.get("emailAddress") if isinstance(owner, dict) else None
        if isinstance(email, str) and email:
            owners.append(email)

    return Entry(
        file_id=file_id if isinstance(file_id, str) else "",
        name=name if isinstance(name, str) else "",
        mime_type=mime_type if isinstance(mime_type, str) else "",
        owners=tuple(owners),
        parents=tuple(parents) if isinstance(parents, list) else (),
    )


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            payload = {}
        err = payload.get("error", {}) if isinstance(payload, dict) else {}
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
