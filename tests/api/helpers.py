"""Builders for ledger API payloads."""

from __future__ import annotations

from typing import Any, Dict


def make_food_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"Calories": "95", "Protein": "0.5", "Fats": "0.3", "Carbs": "25"}
    payload.update(overrides)
    return payload


def make_exercise_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"Sets": "3", "Reps": "10", "Weight": "40"}
    payload.update(overrides)
    return payload


def make_goals_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"calories": 2000, "protein": 120, "carbs": 250, "fats": 70}
    payload.update(overrides)
    return payload
