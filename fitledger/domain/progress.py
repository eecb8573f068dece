"""Progress of aggregated entry attributes against nutrition goals."""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Optional, Union

from ..models.ledger import DailyProgress, Goals, LedgerEntry, Progress, StoredGoals

EntryLike = Union[LedgerEntry, Mapping[str, Any]]
GoalsLike = Union[Goals, StoredGoals]

# Food attribute aggregated for each goal field.
MACRO_ATTRIBUTES: dict[str, str] = {
    "calories": "Calories",
    "protein": "Protein",
    "carbs": "Carbs",
    "fats": "Fats",
}


def parse_number(value: Any) -> Optional[float]:
    """Parse ``value`` as a finite number, returning ``None`` when it is not one."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def _attributes_of(entry: EntryLike) -> Mapping[str, Any]:
    if isinstance(entry, LedgerEntry):
        return entry.attributes
    if isinstance(entry, Mapping):
        return entry
    return {}


def sum_attribute(entries: Iterable[EntryLike], attribute: str) -> float:
    """Sum ``attribute`` over ``entries``; unusable values count as zero."""
    total = 0.0
    for entry in entries:
        number = parse_number(_attributes_of(entry).get(attribute))
        if number is not None:
            total += number
    return total


def compute_progress(
    entries: Iterable[EntryLike], attribute: str, goal: Any
) -> Progress:
    """Aggregate ``attribute`` across ``entries`` and measure it against ``goal``.

    A missing, zero, negative or non-numeric goal yields ``goal=None`` and a
    ratio of ``0.0``. Otherwise the ratio is clamped to ``[0, 1]`` and the
    displayed value never exceeds the goal.
    """
    current = sum_attribute(entries, attribute)
    target = parse_number(goal)
    if target is None or target <= 0:
        return Progress(current=current, display_current=current, goal=None, ratio=0.0)
    ratio = min(max(current / target, 0.0), 1.0)
    return Progress(
        current=current,
        display_current=min(current, target),
        goal=target,
        ratio=ratio,
    )


def build_daily_progress(
    date: str, entries: Iterable[EntryLike], goals: Optional[GoalsLike]
) -> DailyProgress:
    """Compute macro progress for one date's food entries.

    Each macro is measured against its own target, so a missing or unusable
    target only affects that macro.
    """
    items = list(entries)
    targets = goals.model_dump() if goals is not None else {}
    progress = {
        field: compute_progress(items, attribute, targets.get(field))
        for field, attribute in MACRO_ATTRIBUTES.items()
    }
    has_goals = any(item.goal is not None for item in progress.values())
    return DailyProgress(date=date, has_goals=has_goals, **progress)


__all__ = [
    "MACRO_ATTRIBUTES",
    "parse_number",
    "sum_attribute",
    "compute_progress",
    "build_daily_progress",
]
