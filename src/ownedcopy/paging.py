"""Sequential pagination over a folder's children."""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from ownedcopy.controller import GoogleDriveController
from ownedcopy.models import Entry

logger = logging.getLogger(__name__)


def iter_children(
    store: GoogleDriveController,
    folder_id: str,
    *,
    page_size: Optional[int] = None,
) -> Iterator[Entry]:
    """
    Yield the children of folder_id in page order.

    The next page is requested only after the caller has consumed every entry
    of the current one, and no further page is requested once the store
    returns no continuation token. Store errors propagate unchanged.
    """
    page_token: Optional[str] = None
    page_no = 0

    while True:
        page_no += 1
        logger.debug("Listing folder %s (page %d)", folder_id, page_no)
        page = store.list_page(folder_id, page_token=page_token, page_size=page_size)
        yield from page.entries

        page_token = page.next_page_token
        if not page_token:
            break
