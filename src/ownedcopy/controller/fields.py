"""Field definitions for Google Drive API responses."""

from __future__ import annotations

ENTRY_FIELDS: str = (
    "id,"
    "name,"
    "mimeType,"
    "parents,"
    "owners(emailAddress)"
)

LIST_FIELDS: str = f"nextPageToken,files({ENTRY_FIELDS})"

CREATED_FIELDS: str = "id,name,mimeType,parents"
