"""Food search against USDA FoodData Central."""

from .application import FoodDataPort, FoodLookup
from .infrastructure import FoodDataCentralClient, create_food_data_client

__all__ = [
    "FoodDataPort",
    "FoodLookup",
    "FoodDataCentralClient",
    "create_food_data_client",
]
