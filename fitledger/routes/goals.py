from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from ..application.goals import GoalsStore
from ..models.ledger import Goals, StoredGoals
from ..models.session import LedgerSession
from ..security import get_session
from ..wiring import provide_goals_store

router: APIRouter = APIRouter(tags=["goals"])


class GoalsResponse(BaseModel):
    """Current goals; ``goals`` is null until the user sets them.

    Individual targets are null when the stored value is unusable.
    """

    goals: Optional[StoredGoals] = None


@router.get("/goals", response_model=GoalsResponse)
async def get_goals(
    session: LedgerSession = Depends(get_session),
    store: GoalsStore = Depends(provide_goals_store),
) -> GoalsResponse:
    return GoalsResponse(goals=await store.get(session.user_key))


@router.put("/goals", response_model=GoalsResponse)
async def set_goals(
    goals: Goals,
    session: LedgerSession = Depends(get_session),
    store: GoalsStore = Depends(provide_goals_store),
) -> GoalsResponse:
    saved = await store.set(session.user_key, goals)
    return GoalsResponse(goals=StoredGoals.from_goals(saved))
