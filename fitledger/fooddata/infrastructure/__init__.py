from .client import FoodDataCentralClient, create_food_data_client

__all__ = ["FoodDataCentralClient", "create_food_data_client"]
