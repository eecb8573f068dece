"""FastAPI dependency wiring for ledger components."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, HTTPException

from .application.bootstrap import DateBootstrapper
from .application.entries import EntryCollection, exercise_log, food_log
from .application.goals import GoalsStore
from .application.progress import GetDailyProgressUseCase
from .application.users import UserDirectory
from .fooddata.application.lookup import FoodLookup
from .fooddata.application.ports import FoodDataPort
from .fooddata.infrastructure.client import create_food_data_client
from .settings import Settings, get_settings
from .store.application.ports import LedgerStore
from .store.infrastructure.firebase import create_firebase_store
from .store.infrastructure.memory import create_in_memory_store


@lru_cache()
def get_memory_store() -> LedgerStore:
    """Process-wide tree used when ``store_backend`` is ``memory``."""

    return create_in_memory_store()


def get_ledger_store(settings: Settings = Depends(get_settings)) -> LedgerStore:
    if settings.store_backend == "memory":
        return get_memory_store()
    return create_firebase_store(settings=settings)


def provide_date_bootstrapper(
    store: LedgerStore = Depends(get_ledger_store),
) -> DateBootstrapper:
    return DateBootstrapper(store)


def provide_food_log(store: LedgerStore = Depends(get_ledger_store)) -> EntryCollection:
    return food_log(store)


def provide_exercise_log(
    store: LedgerStore = Depends(get_ledger_store),
) -> EntryCollection:
    return exercise_log(store)


def provide_goals_store(store: LedgerStore = Depends(get_ledger_store)) -> GoalsStore:
    return GoalsStore(store)


def provide_user_directory(
    store: LedgerStore = Depends(get_ledger_store),
) -> UserDirectory:
    return UserDirectory(store)


def get_daily_progress_use_case(
    bootstrapper: DateBootstrapper = Depends(provide_date_bootstrapper),
    food: EntryCollection = Depends(provide_food_log),
    goals: GoalsStore = Depends(provide_goals_store),
) -> GetDailyProgressUseCase:
    return GetDailyProgressUseCase(bootstrapper, food, goals)


def provide_food_data(settings: Settings = Depends(get_settings)) -> FoodDataPort:
    if not settings.usda_api_key:
        raise HTTPException(
            status_code=503, detail={"error": "Food lookup is not configured"}
        )
    return create_food_data_client(settings=settings)


def provide_food_lookup(source: FoodDataPort = Depends(provide_food_data)) -> FoodLookup:
    return FoodLookup(source)


__all__ = [
    "get_memory_store",
    "get_ledger_store",
    "provide_date_bootstrapper",
    "provide_food_log",
    "provide_exercise_log",
    "provide_goals_store",
    "provide_user_directory",
    "get_daily_progress_use_case",
    "provide_food_data",
    "provide_food_lookup",
]
