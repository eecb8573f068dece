from .lookup import FoodLookup
from .ports import FoodDataPort

__all__ = ["FoodDataPort", "FoodLookup"]
