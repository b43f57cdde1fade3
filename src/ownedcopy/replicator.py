"""Replication of owned items and unfiltered subtree copies."""

from __future__ import annotations

import logging
from typing import Optional

from ownedcopy.controller import GoogleDriveController
from ownedcopy.errors import OwnedCopyError, TraversalCycleError, is_fatal
from ownedcopy.models import CopyFailure, CopyOperation, CopyReport, Entry
from ownedcopy.paging import iter_children

logger = logging.getLogger(__name__)


class SubtreeReplicator:
    """
    Creates copies of Drive items under new parents.

    Failures of individual create/copy calls are logged and recorded in the
    report, except AuthError and InvalidStateError, which propagate and abort
    the run. Listing failures propagate to the caller.
    """

    def __init__(
        self,
        store: GoogleDriveController,
        report: CopyReport,
        *,
        page_size: Optional[int] = None,
    ) -> None:
        self._store = store
        self._report = report
        self._page_size = page_size
        self._source_path: set[str] = set()

    def replicate_owned(
        self,
        entry: Entry,
        parent_id: str,
        target_email: str,
        root_owner_email: str,
    ) -> Optional[Entry]:
        """
        Replicate an owned item as a new child of parent_id.

        Folders get a new folder of the same name, filled with a full copy of
        the source folder's contents. Files are copied under their own name.
        Returns the created item, or None if creating it failed.
        """
        if not entry.is_folder:
            return self._copy_file(entry, parent_id)

        new_folder = self._create_folder(entry, parent_id)
        if new_folder is not None:
            self.copy_subtree(entry.file_id, new_folder.file_id, target_email, root_owner_email)
        return new_folder

    def copy_subtree(
        self,
        source_folder_id: str,
        dest_folder_id: str,
        target_email: str,
        root_owner_email: str,
    ) -> None:
        """Copy every child of source_folder_id into dest_folder_id, recursively."""
        if source_folder_id in self._source_path:
            raise TraversalCycleError(
                "Folder reappeared inside its own subtree",
                details={"file_id": source_folder_id},
            )

        self._source_path.add(source_folder_id)
        try:
            for child in iter_children(self._store, source_folder_id, page_size=self._page_size):
                if child.is_folder:
                    new_folder = self._create_folder(child, dest_folder_id)
                    if new_folder is not None:
                        self.copy_subtree(
                            child.file_id,
                            new_folder.file_id,
                            target_email,
                            root_owner_email,
                        )
                else:
                    self._copy_file(child, dest_folder_id)
        finally:
            self._source_path.discard(source_folder_id)

    # ----------------------------
    # Internals
    # ----------------------------
    def _create_folder(self, source: Entry, parent_id: str) -> Optional[Entry]:
        try:
            created = self._store.create_folder(source.name, parent_id)
        except OwnedCopyError as exc:
            self._record_failure(source, "create_folder", exc)
            return None

        self._report.record_created(created.file_id, folder=True)
        logger.info("Created new folder: %s (ID: %s)", created.name, created.file_id)
        return created

    def _copy_file(self, source: Entry, parent_id: str) -> Optional[Entry]:
        try:
            created = self._store.copy(source.file_id, parent_id, new_name=source.name)
        except OwnedCopyError as exc:
            self._record_failure(source, "copy_file", exc)
            return None

        self._report.record_created(created.file_id, folder=False)
        logger.info("Copied file: %s (ID: %s)", created.name, created.file_id)
        return created

    def _record_failure(self, source: Entry, operation: CopyOperation, exc: OwnedCopyError) -> None:
        if is_fatal(exc):
            raise exc

        logger.error(
            "Error copying %s %s (ID: %s): %s",
            "folder" if operation == "create_folder" else "file",
            source.name,
            source.file_id,
            exc,
        )
        self._report.failures.append(
            CopyFailure(
                file_id=source.file_id,
                name=source.name,
                operation=operation,
                error_type=exc.__class__.__name__,
                error_message=str(exc),
                error_details=exc.details or None,
            )
        )
