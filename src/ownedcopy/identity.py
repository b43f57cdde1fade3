"""Owner lookups and ownership matching."""

from __future__ import annotations

from ownedcopy.controller import GoogleDriveController
from ownedcopy.errors import OwnerNotFoundError
from ownedcopy.models import Entry


def is_owned_by(entry: Entry, email: str) -> bool:
    # Exact, case-sensitive comparison; Drive addresses are not normalized.
    return email in entry.owners


def resolve_root_owner(store: GoogleDriveController, root_folder_id: str) -> str:
    """
    Return the primary owner of the root folder.

    Raises:
        OwnerNotFoundError: if Drive reports no owners for the folder.
    """
    owners = store.get_owners(root_folder_id)
    if not owners:
        raise OwnerNotFoundError(
            "Could not determine the root folder owner",
            details={"file_id": root_folder_id},
        )
    return owners[0]
