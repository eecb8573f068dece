from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional

from ...application.validation import validate_input
from ...errors import FoodDataUnavailable, InvalidInput
from ...models.fooddata import FoodCandidate
from ...models.ledger import FoodAttributes
from .ports import FoodDataPort

logger = logging.getLogger(__name__)


@dataclass
class FoodLookup:
    """Search foods and turn a chosen one into loggable attributes."""

    source: FoodDataPort

    async def search(self, query: str) -> List[FoodCandidate]:
        """Return details for the matches of ``query``, in match order.

        Matches whose details cannot be fetched are skipped.
        """
        query = query.strip()
        if not query:
            raise InvalidInput("Search query must not be empty")
        fdc_ids = await self.source.search_ids(query)
        found = await asyncio.gather(*(self._fetch(fdc_id) for fdc_id in fdc_ids))
        return [candidate for candidate in found if candidate is not None]

    async def _fetch(self, fdc_id: int) -> Optional[FoodCandidate]:
        try:
            return await self.source.fetch_food(fdc_id)
        except FoodDataUnavailable as exc:
            logger.warning("Skipping food %s: %s", fdc_id, exc)
            return None

    async def attributes_for(self, fdc_id: int) -> FoodAttributes:
        """Fetch ``fdc_id`` and require all four label nutrients."""
        candidate = await self.source.fetch_food(fdc_id)
        return validate_input(
            FoodAttributes, candidate.attributes, context=f"Label nutrients of food {fdc_id}"
        )


__all__ = ["FoodLookup"]
