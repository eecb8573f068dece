from .bootstrap import DateBootstrapper
from .entries import EntryCollection, exercise_log, food_log
from .goals import GoalsStore
from .progress import GetDailyProgressUseCase
from .sequencing import RequestSequencer
from .users import UserDirectory

__all__ = [
    "DateBootstrapper",
    "EntryCollection",
    "exercise_log",
    "food_log",
    "GoalsStore",
    "GetDailyProgressUseCase",
    "RequestSequencer",
    "UserDirectory",
]
