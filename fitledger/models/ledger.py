from __future__ import annotations

import math
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _numeric_string(value: Any) -> str:
    """Return ``value`` as a trimmed numeric string, rejecting bad input."""
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    if isinstance(value, (int, float)):
        text = str(value)
    elif isinstance(value, str):
        text = value.strip()
    else:
        raise ValueError(f"must be a number, got {type(value).__name__}")
    try:
        number = float(text)
    except ValueError:
        raise ValueError(f"{text!r} is not a number") from None
    if not math.isfinite(number) or number < 0:
        raise ValueError(f"{text!r} is not a non-negative number")
    return text


class _EntryAttributes(BaseModel):
    """Entry attributes as stored: capitalized keys, numeric strings."""

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _check_numeric(cls, value: Any) -> str:
        return _numeric_string(value)

    def to_store(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


class FoodAttributes(_EntryAttributes):
    calories: str = Field(..., alias="Calories")
    protein: str = Field(..., alias="Protein")
    fats: str = Field(..., alias="Fats")
    carbs: str = Field(..., alias="Carbs")


class ExerciseAttributes(_EntryAttributes):
    sets: str = Field(..., alias="Sets")
    reps: str = Field(..., alias="Reps")
    weight: str = Field(..., alias="Weight")


class LedgerEntry(BaseModel):
    """A named food or exercise entry as read back from the store."""

    name: str
    attributes: Dict[str, Any] = Field(default_factory=dict)


class Goals(BaseModel):
    """Daily nutrition targets, replaced wholesale on update."""

    calories: float = Field(..., gt=0, allow_inf_nan=False)
    protein: float = Field(..., gt=0, allow_inf_nan=False)
    carbs: float = Field(..., gt=0, allow_inf_nan=False)
    fats: float = Field(..., gt=0, allow_inf_nan=False)

    def to_store(self) -> Dict[str, float | int]:
        return {
            key: int(value) if float(value).is_integer() else value
            for key, value in self.model_dump().items()
        }


def _usable_goal(value: Any) -> Optional[float]:
    """Return ``value`` as a positive finite number, or ``None``."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


class StoredGoals(BaseModel):
    """Goals as read back from the store.

    Older records hold ``0`` or junk for targets the user never filled in.
    Such fields read as ``None`` so only that metric loses its goal.
    """

    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fats: Optional[float] = None

    @field_validator("*", mode="before")
    @classmethod
    def _drop_unusable(cls, value: Any) -> Optional[float]:
        return _usable_goal(value)

    @classmethod
    def from_goals(cls, goals: Goals) -> "StoredGoals":
        return cls(**goals.model_dump())

    @property
    def has_any(self) -> bool:
        return any(value is not None for value in self.model_dump().values())


class Progress(BaseModel):
    """Aggregated value of one attribute measured against its goal."""

    current: float
    display_current: float
    goal: Optional[float] = None
    ratio: float = Field(..., ge=0.0, le=1.0)


class DailyProgress(BaseModel):
    """Macro progress for a single date."""

    date: str
    calories: Progress
    protein: Progress
    carbs: Progress
    fats: Progress
    has_goals: bool


__all__ = [
    "FoodAttributes",
    "ExerciseAttributes",
    "LedgerEntry",
    "Goals",
    "StoredGoals",
    "Progress",
    "DailyProgress",
]
