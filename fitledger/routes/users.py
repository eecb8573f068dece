from __future__ import annotations

from fastapi import APIRouter, Depends

from ..application.users import UserDirectory
from ..domain.paths import user_path
from ..models.responses import OperationStatus
from ..models.session import LedgerSession
from ..security import get_session
from ..wiring import provide_user_directory

router: APIRouter = APIRouter(tags=["users"])


@router.post("/users", status_code=201, response_model=OperationStatus)
async def register_user(
    session: LedgerSession = Depends(get_session),
    users: UserDirectory = Depends(provide_user_directory),
) -> OperationStatus:
    created = await users.register(session.user_key)
    return OperationStatus(status="ok", path=user_path(session.user_key), created=created)
