from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from ..domain.paths import validate_date
from ..domain.progress import build_daily_progress
from ..models.ledger import DailyProgress, LedgerEntry, StoredGoals
from .bootstrap import DateBootstrapper
from .entries import EntryCollection
from .goals import GoalsStore

ProgressBuilder = Callable[
    [str, Iterable[LedgerEntry], Optional[StoredGoals]], DailyProgress
]


@dataclass
class GetDailyProgressUseCase:
    """Bootstrap a date and report its food totals against the user's goals."""

    bootstrapper: DateBootstrapper
    food: EntryCollection
    goals: GoalsStore
    progress_builder: ProgressBuilder = build_daily_progress

    async def __call__(self, user: str, date: str) -> DailyProgress:
        day = validate_date(date)
        await self.bootstrapper.ensure_date(user, day)
        entries = await self.food.list(user, day)
        goals = await self.goals.get(user)
        return self.progress_builder(day, entries, goals)


__all__ = ["GetDailyProgressUseCase"]
