"""Ownership-filtered traversal of a Drive folder tree."""

from __future__ import annotations

import logging
from typing import Optional

from ownedcopy.controller import GoogleDriveController
from ownedcopy.errors import TraversalCycleError
from ownedcopy.identity import is_owned_by
from ownedcopy.models import CopyReport
from ownedcopy.paging import iter_children
from ownedcopy.replicator import SubtreeReplicator

logger = logging.getLogger(__name__)


class OwnedItemWalker:
    """
    Walks every folder below a root and replicates items owned by a target.

    Each owned item is replicated before the walk descends into it, and every
    folder is descended into whether or not it is owned. Items created by the
    same run are never revisited.
    """

    def __init__(
        self,
        store: GoogleDriveController,
        replicator: SubtreeReplicator,
        report: CopyReport,
        *,
        page_size: Optional[int] = None,
    ) -> None:
        self._store = store
        self._replicator = replicator
        self._report = report
        self._page_size = page_size
        self._path: set[str] = set()

    def walk(self, folder_id: str, target_email: str, root_owner_email: str) -> None:
        if folder_id in self._path:
            raise TraversalCycleError(
                "Folder reappeared on its own traversal path",
                details={"file_id": folder_id},
            )

        logger.info("Processing folder with ID: %s", folder_id)
        self._report.folders_visited += 1
        self._path.add(folder_id)
        try:
            for child in iter_children(self._store, folder_id, page_size=self._page_size):
                if child.file_id in self._report.created_ids:
                    logger.debug("Skipping item created by this run: %s", child.file_id)
                    continue

                if is_owned_by(child, target_email):
                    logger.info(
                        "Found item owned by target user: %s (ID: %s)",
                        child.name,
                        child.file_id,
                    )
                    self._report.owned_items_found += 1
                    self._replicator.replicate_owned(
                        child, folder_id, target_email, root_owner_email
                    )

                if child.is_folder:
                    self.walk(child.file_id, target_email, root_owner_email)
        finally:
            self._path.discard(folder_id)
