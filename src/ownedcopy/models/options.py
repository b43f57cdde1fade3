"""Run options for ownedcopy."""

from __future__ import annotations

from dataclasses import dataclass

MAX_PAGE_SIZE: int = 1000


@dataclass(slots=True, frozen=True)
class RunOptions:
    """
    Tunables for one copy run.

    Attributes:
        page_size: Children requested per list call (1..1000).
        supports_all_drives: Send shared-drive flags on every request.
        max_retries: Retries for rate-limit/network/5xx errors. 0 means every
            Drive call is attempted exactly once.
        initial_retry_delay_sec: First backoff delay; doubled per retry.
    """

    page_size: int = MAX_PAGE_SIZE
    supports_all_drives: bool = True
    max_retries: int = 0
    initial_retry_delay_sec: float = 1.0

    def __post_init__(self) -> None:
        if not isinstance(self.page_size, int) or not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")
        if not isinstance(self.max_retries, int) or self.max_retries < 0:
            raise ValueError("max_retries must be a non-negative int")
        if self.initial_retry_delay_sec < 0:
            raise ValueError("initial_retry_delay_sec must not be negative")
