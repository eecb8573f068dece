from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date as date_type
from typing import Any, Dict, List, Mapping, Type, Union

from ..domain.paths import Category, collection_path, entry_path, validate_segment
from ..errors import StoreError
from ..models.ledger import ExerciseAttributes, FoodAttributes, LedgerEntry
from ..store.application.ports import LedgerStore
from .validation import validate_input

logger = logging.getLogger(__name__)

DateLike = Union[str, date_type]
AttributesModel = Union[Type[FoodAttributes], Type[ExerciseAttributes]]

ATTRIBUTE_MODELS: Dict[Category, AttributesModel] = {
    Category.FOOD: FoodAttributes,
    Category.EXERCISES: ExerciseAttributes,
}


@dataclass
class EntryCollection:
    """Named entries of one category under a user's date record."""

    store: LedgerStore
    category: Category

    def __post_init__(self) -> None:
        self.category = Category(self.category)

    @property
    def attributes_model(self) -> AttributesModel:
        return ATTRIBUTE_MODELS[self.category]

    def validate_attributes(
        self, name: str, attributes: Union[Mapping[str, Any], FoodAttributes, ExerciseAttributes]
    ) -> Dict[str, str]:
        validate_segment(name)
        model = validate_input(
            self.attributes_model,
            attributes,
            context=f"{self.category.value} entry {name!r}",
        )
        return model.to_store()

    async def upsert(
        self,
        user: str,
        date: DateLike,
        name: str,
        attributes: Union[Mapping[str, Any], FoodAttributes, ExerciseAttributes],
    ) -> Dict[str, str]:
        """Write ``attributes`` under ``name``, replacing any previous entry."""
        payload = self.validate_attributes(name, attributes)
        path = entry_path(user, date, self.category, name)
        try:
            await self.store.write(path, payload)
        except StoreError:
            logger.exception("Error writing %s entry %s", self.category.value, path)
            raise
        logger.info("Saved %s entry %s", self.category.value, path)
        return payload

    async def remove(self, user: str, date: DateLike, name: str) -> None:
        """Delete the entry called ``name``; a missing entry is not an error."""
        path = entry_path(user, date, self.category, name)
        try:
            await self.store.delete(path)
        except StoreError:
            logger.exception("Error deleting %s entry %s", self.category.value, path)
            raise
        logger.info("Deleted %s entry %s", self.category.value, path)

    async def list(self, user: str, date: DateLike) -> List[LedgerEntry]:
        """Return the entries recorded for ``date``, sorted by name."""
        path = collection_path(user, date, self.category)
        try:
            raw = await self.store.read(path)
        except StoreError:
            logger.exception("Error fetching %s entries at %s", self.category.value, path)
            raise
        # An untouched collection may hold the empty placeholder instead of a mapping.
        if not isinstance(raw, dict):
            logger.debug("No %s entries at %s", self.category.value, path)
            return []
        return [
            LedgerEntry(name=name, attributes=value if isinstance(value, dict) else {})
            for name, value in sorted(raw.items())
        ]


def food_log(store: LedgerStore) -> EntryCollection:
    return EntryCollection(store, Category.FOOD)


def exercise_log(store: LedgerStore) -> EntryCollection:
    return EntryCollection(store, Category.EXERCISES)


__all__ = ["EntryCollection", "food_log", "exercise_log", "ATTRIBUTE_MODELS"]
