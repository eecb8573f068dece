"""Stub nutrition database for lookup tests."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from fitledger.errors import FoodDataUnavailable
from fitledger.fooddata.application.ports import FoodDataPort
from fitledger.models.fooddata import FoodCandidate


class StubFoodData(FoodDataPort):
    """Serve canned foods; ids listed in ``failing`` raise on fetch."""

    def __init__(
        self, foods: Iterable[FoodCandidate] = (), *, failing: Iterable[int] = ()
    ) -> None:
        self.foods = {food.fdc_id: food for food in foods}
        self.failing = list(failing)
        self.queries: List[str] = []

    async def search_ids(self, query: str) -> Sequence[int]:
        self.queries.append(query)
        return [*self.foods, *self.failing]

    async def fetch_food(self, fdc_id: int) -> FoodCandidate:
        if fdc_id in self.failing or fdc_id not in self.foods:
            raise FoodDataUnavailable(f"no record for {fdc_id}", status_code=404)
        return self.foods[fdc_id]
