from .ledger import (
    DailyProgress,
    ExerciseAttributes,
    FoodAttributes,
    Goals,
    StoredGoals,
    LedgerEntry,
    Progress,
)
from .fooddata import FoodCandidate
from .responses import OperationStatus, RecordedDatesResponse
from .session import LedgerSession, current_date

__all__ = [
    'DailyProgress',
    'FoodCandidate',
    'ExerciseAttributes',
    'FoodAttributes',
    'Goals',
    'StoredGoals',
    'LedgerEntry',
    'Progress',
    'OperationStatus',
    'RecordedDatesResponse',
    'LedgerSession',
    'current_date',
]
