from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, Query

from ..application.bootstrap import DateBootstrapper
from ..application.entries import EntryCollection
from ..fooddata.application.lookup import FoodLookup
from ..models.fooddata import FoodCandidate
from ..models.ledger import LedgerEntry
from ..models.session import LedgerSession
from ..security import get_session
from ..wiring import provide_date_bootstrapper, provide_food_log, provide_food_lookup
from .utils import date_path_param, name_path_param

router: APIRouter = APIRouter(tags=["foods"])


@router.get("/foods/search", response_model=List[FoodCandidate])
async def search_foods(
    query: str = Query(..., min_length=1, description="Free-text food search."),
    lookup: FoodLookup = Depends(provide_food_lookup),
) -> List[FoodCandidate]:
    """Search FoodData Central and return the label nutrients of each match."""
    return await lookup.search(query)


@router.put("/dates/{date}/food/{name}/fdc/{fdc_id}", response_model=LedgerEntry)
async def log_food_from_lookup(
    date: str = date_path_param,
    name: str = name_path_param,
    fdc_id: int = Path(..., description="FoodData Central id of the food."),
    session: LedgerSession = Depends(get_session),
    lookup: FoodLookup = Depends(provide_food_lookup),
    bootstrapper: DateBootstrapper = Depends(provide_date_bootstrapper),
    food: EntryCollection = Depends(provide_food_log),
) -> LedgerEntry:
    """Log a food entry filled from the label nutrients of ``fdc_id``."""
    attributes = await lookup.attributes_for(fdc_id)
    await bootstrapper.ensure_date(session.user_key, date)
    stored = await food.upsert(session.user_key, date, name, attributes)
    return LedgerEntry(name=name, attributes=stored)
