from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date as date_type
from typing import Any, Dict, Union

from ..domain.paths import Category, date_path
from ..errors import StoreError
from ..store.application.ports import LedgerStore

logger = logging.getLogger(__name__)


def empty_date_record() -> Dict[str, Any]:
    return {Category.FOOD.value: {}, Category.EXERCISES.value: {}}


@dataclass
class DateBootstrapper:
    """Ensure a user's date record exists before entries are read or written."""

    store: LedgerStore

    async def ensure_date(self, user: str, date: Union[str, date_type]) -> bool:
        """Create ``users/{user}/{date}`` with empty collections when missing.

        Returns ``True`` when this call created the record. Concurrent callers
        may both observe the record as missing; they write the same empty
        shape, so the outcome does not depend on who wins.
        """
        path = date_path(user, date)
        try:
            created = await self.store.write_if_absent(path, empty_date_record())
        except StoreError:
            logger.exception("Error checking or adding date %s", path)
            raise
        if created:
            logger.info("Added date record %s", path)
        else:
            logger.debug("Date record %s already exists", path)
        return created


__all__ = ["DateBootstrapper", "empty_date_record"]
