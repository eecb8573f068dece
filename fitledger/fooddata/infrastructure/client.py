"""HTTP-backed implementation of the food data port."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from ...errors import FoodDataUnavailable
from ...models.fooddata import FoodCandidate, attributes_from_label
from ...settings import Settings
from ..application.ports import FoodDataPort

logger = logging.getLogger(__name__)

# Only the first matches of a search are expanded into full records.
SEARCH_LIMIT = 10


class FoodDataCentralClient(FoodDataPort):
    """Query the FoodData Central REST API with an ``api_key`` parameter."""

    def __init__(self, *, settings: Settings) -> None:
        if not settings.usda_api_key:
            raise ValueError("usda_api_key is not configured")
        self._base_url: str = settings.usda_api_url.rstrip("/")
        self._api_key: str = settings.usda_api_key
        self._timeout: float = settings.usda_timeout

    async def _get(self, path: str, params: Optional[Dict[str, str]] = None) -> Any:
        query = {"api_key": self._api_key, **(params or {})}
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.get(f"{self._base_url}{path}", params=query)
        except httpx.HTTPError as exc:
            logger.exception("GET %s failed", path)
            raise FoodDataUnavailable(f"FoodData Central request failed ({path})") from exc
        if resp.status_code != 200:
            logger.error("GET %s returned %s: %s", path, resp.status_code, resp.text)
            raise FoodDataUnavailable(
                f"FoodData Central returned {resp.status_code} for {path}",
                status_code=resp.status_code,
            )
        return resp.json()

    async def search_ids(self, query: str) -> Sequence[int]:
        data = await self._get("/foods/search", {"query": query})
        foods = data.get("foods") if isinstance(data, dict) else None
        fdc_ids: List[int] = []
        for food in (foods or [])[:SEARCH_LIMIT]:
            fdc_id = food.get("fdcId") if isinstance(food, dict) else None
            if isinstance(fdc_id, int) and fdc_id not in fdc_ids:
                fdc_ids.append(fdc_id)
        return fdc_ids

    async def fetch_food(self, fdc_id: int) -> FoodCandidate:
        data = await self._get(f"/food/{fdc_id}")
        if not isinstance(data, dict):
            raise FoodDataUnavailable(f"FoodData Central returned no record for {fdc_id}")
        return FoodCandidate(
            fdc_id=data.get("fdcId", fdc_id),
            description=data.get("description") or "",
            serving_size=data.get("servingSize"),
            serving_size_unit=data.get("servingSizeUnit"),
            attributes=attributes_from_label(data.get("labelNutrients") or {}),
        )


def create_food_data_client(*, settings: Settings) -> FoodDataPort:
    """Create a FoodData Central client without FastAPI dependencies."""
    return FoodDataCentralClient(settings=settings)
