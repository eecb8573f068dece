from .fooddata import StubFoodData
from .store import RecordingStore

__all__ = ["RecordingStore", "StubFoodData"]
