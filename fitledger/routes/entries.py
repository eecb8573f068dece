from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from ..application.bootstrap import DateBootstrapper
from ..application.entries import EntryCollection
from ..domain.paths import Category, entry_path
from ..models.ledger import ExerciseAttributes, FoodAttributes, LedgerEntry
from ..models.responses import OperationStatus
from ..models.session import LedgerSession
from ..security import get_session
from ..wiring import provide_date_bootstrapper, provide_exercise_log, provide_food_log
from .utils import date_path_param, name_path_param

router: APIRouter = APIRouter(tags=["entries"])


@router.get("/dates/{date}/food", response_model=List[LedgerEntry])
async def list_food(
    date: str = date_path_param,
    session: LedgerSession = Depends(get_session),
    food: EntryCollection = Depends(provide_food_log),
) -> List[LedgerEntry]:
    return await food.list(session.user_key, date)


@router.put("/dates/{date}/food/{name}", response_model=LedgerEntry)
async def upsert_food(
    attributes: FoodAttributes,
    date: str = date_path_param,
    name: str = name_path_param,
    session: LedgerSession = Depends(get_session),
    bootstrapper: DateBootstrapper = Depends(provide_date_bootstrapper),
    food: EntryCollection = Depends(provide_food_log),
) -> LedgerEntry:
    await bootstrapper.ensure_date(session.user_key, date)
    stored = await food.upsert(session.user_key, date, name, attributes)
    return LedgerEntry(name=name, attributes=stored)


@router.delete("/dates/{date}/food/{name}", response_model=OperationStatus)
async def remove_food(
    date: str = date_path_param,
    name: str = name_path_param,
    session: LedgerSession = Depends(get_session),
    food: EntryCollection = Depends(provide_food_log),
) -> OperationStatus:
    await food.remove(session.user_key, date, name)
    return OperationStatus(
        status="ok", path=entry_path(session.user_key, date, Category.FOOD, name)
    )


@router.get("/dates/{date}/exercises", response_model=List[LedgerEntry])
async def list_exercises(
    date: str = date_path_param,
    session: LedgerSession = Depends(get_session),
    exercises: EntryCollection = Depends(provide_exercise_log),
) -> List[LedgerEntry]:
    return await exercises.list(session.user_key, date)


@router.put("/dates/{date}/exercises/{name}", response_model=LedgerEntry)
async def upsert_exercise(
    attributes: ExerciseAttributes,
    date: str = date_path_param,
    name: str = name_path_param,
    session: LedgerSession = Depends(get_session),
    bootstrapper: DateBootstrapper = Depends(provide_date_bootstrapper),
    exercises: EntryCollection = Depends(provide_exercise_log),
) -> LedgerEntry:
    await bootstrapper.ensure_date(session.user_key, date)
    stored = await exercises.upsert(session.user_key, date, name, attributes)
    return LedgerEntry(name=name, attributes=stored)


@router.delete("/dates/{date}/exercises/{name}", response_model=OperationStatus)
async def remove_exercise(
    date: str = date_path_param,
    name: str = name_path_param,
    session: LedgerSession = Depends(get_session),
    exercises: EntryCollection = Depends(provide_exercise_log),
) -> OperationStatus:
    await exercises.remove(session.user_key, date, name)
    return OperationStatus(
        status="ok", path=entry_path(session.user_key, date, Category.EXERCISES, name)
    )
