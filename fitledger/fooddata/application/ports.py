"""Ports for looking up foods in a nutrition database."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...models.fooddata import FoodCandidate


class FoodDataPort(ABC):
    """Interface describing nutrition database lookups."""

    @abstractmethod
    async def search_ids(self, query: str) -> Sequence[int]:
        """Return the ids of the best matches for ``query``."""

    @abstractmethod
    async def fetch_food(self, fdc_id: int) -> FoodCandidate:
        """Return the details of one food."""
