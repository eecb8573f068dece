"""Port describing the hierarchical store behind the ledger."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class LedgerStore(ABC):
    """Path-addressed key tree with per-path atomic operations.

    Paths are ``/``-delimited (``users/alice/2024-05-01/food/apple``). There
    are no transactions spanning more than one path. Implementations raise
    ``StoreUnavailable`` when the backing service cannot be reached or refuses
    the request.
    """

    @abstractmethod
    async def read(self, path: str) -> Optional[Any]:
        """Return the value at or under ``path``, or ``None`` when absent."""

    @abstractmethod
    async def write(self, path: str, value: Any) -> None:
        """Replace the value at ``path`` without touching sibling paths."""

    @abstractmethod
    async def delete(self, path: str) -> None:
        """Remove ``path`` and its descendants; absent paths are a no-op."""

    async def exists(self, path: str) -> bool:
        return await self.read(path) is not None

    async def write_if_absent(self, path: str, value: Any) -> bool:
        """Write ``value`` only when ``path`` holds nothing.

        Returns whether a write happened. The default is a plain
        check-then-set; stores with conditional writes override it.
        """
        if await self.exists(path):
            return False
        await self.write(path, value)
        return True


__all__ = ["LedgerStore"]
