"""Error taxonomy shared by the ledger components."""

from __future__ import annotations

from typing import Optional


class LedgerError(Exception):
    """Base class for every error raised by the ledger core."""


class StoreError(LedgerError):
    """A ledger store operation failed."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.status_code = status_code


class StoreUnavailable(StoreError):
    """Network, timeout or permission failure while talking to the store."""


class InvalidInput(LedgerError, ValueError):
    """Malformed names, dates, entry attributes or goals."""


class FoodDataUnavailable(LedgerError):
    """The nutrition database could not answer a lookup."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "LedgerError",
    "StoreError",
    "StoreUnavailable",
    "InvalidInput",
    "FoodDataUnavailable",
]
