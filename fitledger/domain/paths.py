"""Store path construction for the ledger tree.

Layout::

    users/{user}                               user root
    users/{user}/Goals                         nutrition targets
    users/{user}/{YYYY-MM-DD}                  date record
    users/{user}/{YYYY-MM-DD}/food/{name}      food entry
    users/{user}/{YYYY-MM-DD}/exercises/{name} exercise entry
"""

from __future__ import annotations

import re
from datetime import date as date_type, datetime
from enum import Enum
from typing import Union

from ..errors import InvalidInput

USERS_ROOT = "users"
GOALS_KEY = "Goals"
SEPARATOR = "/"

# Characters the hierarchical store refuses in a key.
_FORBIDDEN_SEGMENT_CHARS = frozenset("/.#$[]")
_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class Category(str, Enum):
    """Entry collections held by every date record."""

    FOOD = "food"
    EXERCISES = "exercises"


def validate_segment(segment: str, *, kind: str = "name") -> str:
    if not segment or not segment.strip():
        raise InvalidInput(f"{kind.capitalize()} must not be empty")
    bad = sorted(set(segment) & _FORBIDDEN_SEGMENT_CHARS)
    if bad:
        raise InvalidInput(
            f"{kind.capitalize()} {segment!r} contains forbidden characters: {''.join(bad)}"
        )
    return segment


def is_iso_date(value: str) -> bool:
    if not _DATE_PATTERN.match(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def validate_date(value: Union[str, date_type]) -> str:
    """Return ``value`` as a ``YYYY-MM-DD`` string or raise ``InvalidInput``."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date_type):
        return value.isoformat()
    if not isinstance(value, str) or not is_iso_date(value):
        raise InvalidInput(f"Date {value!r} is not a calendar date in YYYY-MM-DD format")
    return value


def join(*segments: str) -> str:
    return SEPARATOR.join(segments)


def user_path(user: str) -> str:
    return join(USERS_ROOT, validate_segment(user, kind="user key"))


def goals_path(user: str) -> str:
    return join(user_path(user), GOALS_KEY)


def date_path(user: str, date: Union[str, date_type]) -> str:
    return join(user_path(user), validate_date(date))


def collection_path(user: str, date: Union[str, date_type], category: Category) -> str:
    return join(date_path(user, date), Category(category).value)


def entry_path(
    user: str, date: Union[str, date_type], category: Category, name: str
) -> str:
    return join(collection_path(user, date, category), validate_segment(name))


def split(path: str) -> list[str]:
    """Split ``path`` into its non-empty segments."""
    return [segment for segment in path.strip(SEPARATOR).split(SEPARATOR) if segment]


__all__ = [
    "USERS_ROOT",
    "GOALS_KEY",
    "Category",
    "validate_segment",
    "validate_date",
    "is_iso_date",
    "user_path",
    "goals_path",
    "date_path",
    "collection_path",
    "entry_path",
    "join",
    "split",
]
