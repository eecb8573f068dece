from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field

from .ledger import _numeric_string

# FoodData Central ``labelNutrients`` keys and the food attribute each fills.
LABEL_NUTRIENTS: Dict[str, str] = {
    "calories": "Calories",
    "protein": "Protein",
    "fat": "Fats",
    "carbohydrates": "Carbs",
}


def _label_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return _numeric_string(value)


def attributes_from_label(label_nutrients: Mapping[str, Any]) -> Dict[str, str]:
    """Map label nutrients onto food attribute names.

    Nutrients that are missing or not usable numbers are left out, so the
    result may be partial.
    """
    attributes: Dict[str, str] = {}
    for nutrient, attribute in LABEL_NUTRIENTS.items():
        entry = label_nutrients.get(nutrient)
        if not isinstance(entry, Mapping) or entry.get("value") is None:
            continue
        try:
            attributes[attribute] = _label_value(entry["value"])
        except ValueError:
            continue
    return attributes


class FoodCandidate(BaseModel):
    """A FoodData Central item offered for logging."""

    fdc_id: int
    description: str = ""
    serving_size: Optional[float] = None
    serving_size_unit: Optional[str] = None
    attributes: Dict[str, str] = Field(default_factory=dict)


__all__ = ["LABEL_NUTRIENTS", "attributes_from_label", "FoodCandidate"]
