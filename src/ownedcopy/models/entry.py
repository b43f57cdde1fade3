"""Data model for Drive items as seen by the copy run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ownedcopy.util.mime import is_folder


@dataclass(slots=True, frozen=True)
class Entry:
    """
    Immutable snapshot of a Drive item returned by the store.

    Notes:
        - `owners` keeps the order returned by Drive; the first one is the
          primary owner.
        - `parents` is informational; the run never tracks parent links itself.
    """

    file_id: str
    name: str
    mime_type: str
    owners: tuple[str, ...] = ()
    parents: tuple[str, ...] = ()

    @property
    def is_folder(self) -> bool:
        return is_folder(self.mime_type)


@dataclass(slots=True, frozen=True)
class Page:
    """One batch of children; next_page_token is None on the final page."""

    entries: tuple[Entry, ...]
    next_page_token: Optional[str] = None
