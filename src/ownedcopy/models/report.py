"""Result models for a copy run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional


CopyOperation = Literal["create_folder", "copy_file"]


@dataclass(slots=True)
class CopyFailure:
    """A recoverable failure of a single create/copy call."""

    file_id: str
    name: str
    operation: CopyOperation
    error_type: str
    error_message: str
    error_details: Optional[dict[str, Any]] = None


@dataclass(slots=True)
class CopyReport:
    """Aggregate counters and failures for one run."""

    root_folder_id: str
    target_email: str
    root_owner_email: Optional[str] = None

    folders_visited: int = 0
    owned_items_found: int = 0
    folders_created: int = 0
    files_copied: int = 0

    failures: list[CopyFailure] = field(default_factory=list)
    created_ids: set[str] = field(default_factory=set)

    @property
    def ok(self) -> bool:
        return not self.failures

    def record_created(self, file_id: str, *, folder: bool) -> None:
        self.created_ids.add(file_id)
        if folder:
            self.folders_created += 1
        else:
            self.files_copied += 1

    def summary(self) -> dict[str, int]:
        return {
            "folders_visited": self.folders_visited,
            "owned_items_found": self.owned_items_found,
            "folders_created": self.folders_created,
            "files_copied": self.files_copied,
            "failed": len(self.failures),
        }
