"""Public model exports for ownedcopy."""

from __future__ import annotations

from .entry import Entry, Page
from .options import MAX_PAGE_SIZE, RunOptions
from .report import CopyFailure, CopyOperation, CopyReport

__all__ = [
    "Entry",
    "Page",
    "RunOptions",
    "MAX_PAGE_SIZE",
    "CopyFailure",
    "CopyOperation",
    "CopyReport",
]
