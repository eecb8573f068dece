from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from ..domain.paths import is_iso_date, user_path
from ..errors import StoreError
from ..store.application.ports import LedgerStore

logger = logging.getLogger(__name__)


@dataclass
class UserDirectory:
    """User roots of the ledger tree."""

    store: LedgerStore

    async def register(self, user: str) -> bool:
        """Create an empty root for ``user``; an existing ledger is left alone."""
        path = user_path(user)
        try:
            created = await self.store.write_if_absent(path, {})
        except StoreError:
            logger.exception("Error creating user root %s", path)
            raise
        if created:
            logger.info("Created user root %s", path)
        return created

    async def recorded_dates(self, user: str) -> List[str]:
        """Dates holding a record for ``user``, oldest first."""
        path = user_path(user)
        try:
            raw = await self.store.read(path)
        except StoreError:
            logger.exception("Error fetching user data at %s", path)
            raise
        if not isinstance(raw, dict):
            return []
        return sorted(key for key in raw if is_iso_date(key))


__all__ = ["UserDirectory"]
