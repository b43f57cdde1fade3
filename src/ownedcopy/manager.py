"""OwnedCopyManager: runs one ownership-filtered copy job."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ownedcopy.auth import AuthInfo
from ownedcopy.controller import GoogleDriveController
from ownedcopy.errors import InvalidArgumentError
from ownedcopy.identity import resolve_root_owner
from ownedcopy.models import CopyReport, RunOptions
from ownedcopy.replicator import SubtreeReplicator
from ownedcopy.walker import OwnedItemWalker

logger = logging.getLogger(__name__)


class OwnedCopyManager:
    """High-level entry point: resolve root owner, walk, replicate, report."""

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        scopes: Optional[Sequence[str]] = None,
        options: Optional[RunOptions] = None,
    ) -> None:
        self._options = options or RunOptions()
        self._controller = GoogleDriveController(
            auth_info,
            scopes=scopes,
            options=self._options,
        )

    @classmethod
    def from_controller(
        cls,
        controller: GoogleDriveController,
        options: Optional[RunOptions] = None,
    ) -> "OwnedCopyManager":
        """Create manager with an injected controller (useful for tests)."""
        obj = cls.__new__(cls)
        obj._options = options or RunOptions()
        obj._controller = controller
        return obj

    @property
    def options(self) -> RunOptions:
        return self._options

    def run(self, root_folder_id: str, target_email: str) -> CopyReport:
        """
        Copy every item owned by target_email found below root_folder_id.

        Raises:
            InvalidArgumentError: if an input is empty.
            OwnerNotFoundError: if the root folder has no owner; nothing is
                traversed in that case.
            OwnedCopyError: listing/owner failures and fatal copy failures.
        """
        root_folder_id = _require_text(root_folder_id, "root_folder_id")
        target_email = _require_text(target_email, "target_email")

        report = CopyReport(root_folder_id=root_folder_id, target_email=target_email)

        root_owner_email = resolve_root_owner(self._controller, root_folder_id)
        report.root_owner_email = root_owner_email
        logger.info("Root folder owner: %s", root_owner_email)
        logger.info("Searching for files owned by: %s", target_email)

        page_size = self._options.page_size
        replicator = SubtreeReplicator(self._controller, report, page_size=page_size)
        walker = OwnedItemWalker(self._controller, replicator, report, page_size=page_size)
        walker.walk(root_folder_id, target_email, root_owner_email)

        logger.info("Process completed successfully!")
        logger.info("Summary: %s", report.summary())
        return report


def _require_text(value: str, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"{name} must be a non-empty string")
    return value.strip()
