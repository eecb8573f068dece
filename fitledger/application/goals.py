from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from ..domain.paths import goals_path
from ..errors import StoreError
from ..models.ledger import Goals, StoredGoals
from ..store.application.ports import LedgerStore
from .validation import describe_validation_error, validate_input

logger = logging.getLogger(__name__)


@dataclass
class GoalsStore:
    """Read and replace a user's nutrition targets."""

    store: LedgerStore

    async def get(self, user: str) -> Optional[StoredGoals]:
        """Return the stored goals, or ``None`` when no record exists.

        Fields that are zero, negative or not numbers come back as ``None``;
        the rest of the record is kept.
        """
        path = goals_path(user)
        try:
            raw = await self.store.read(path)
        except StoreError:
            logger.exception("Error fetching goals at %s", path)
            raise
        if raw is None:
            logger.debug("No goals stored at %s", path)
            return None
        try:
            goals = StoredGoals.model_validate(raw)
        except ValidationError as exc:
            logger.warning(
                "Ignoring malformed goals at %s: %s", path, describe_validation_error(exc)
            )
            return None
        if not goals.has_any:
            logger.warning("Goals at %s hold no usable targets", path)
        return goals

    async def set(self, user: str, goals: Union[Goals, Mapping[str, Any]]) -> Goals:
        """Validate ``goals`` and overwrite the whole record."""
        validated = validate_input(Goals, goals, context="Goals")
        path = goals_path(user)
        try:
            await self.store.write(path, validated.to_store())
        except StoreError:
            logger.exception("Error saving goals at %s", path)
            raise
        logger.info("Saved goals at %s", path)
        return validated


__all__ = ["GoalsStore"]
