from __future__ import annotations

from fastapi import APIRouter, Depends

from ..application.bootstrap import DateBootstrapper
from ..application.progress import GetDailyProgressUseCase
from ..application.users import UserDirectory
from ..domain.paths import date_path
from ..models.ledger import DailyProgress
from ..models.responses import OperationStatus, RecordedDatesResponse
from ..models.session import LedgerSession
from ..security import get_session
from ..wiring import (
    get_daily_progress_use_case,
    provide_date_bootstrapper,
    provide_user_directory,
)
from .utils import date_path_param

router: APIRouter = APIRouter(tags=["dates"])


@router.get("/dates", response_model=RecordedDatesResponse)
async def list_recorded_dates(
    session: LedgerSession = Depends(get_session),
    users: UserDirectory = Depends(provide_user_directory),
) -> RecordedDatesResponse:
    dates = await users.recorded_dates(session.user_key)
    return RecordedDatesResponse(user=session.user_key, dates=dates)


@router.put("/dates/{date}", response_model=OperationStatus)
async def ensure_date(
    date: str = date_path_param,
    session: LedgerSession = Depends(get_session),
    bootstrapper: DateBootstrapper = Depends(provide_date_bootstrapper),
) -> OperationStatus:
    created = await bootstrapper.ensure_date(session.user_key, date)
    return OperationStatus(
        status="ok", path=date_path(session.user_key, date), created=created
    )


@router.get("/dates/{date}/progress", response_model=DailyProgress)
async def get_daily_progress(
    date: str = date_path_param,
    session: LedgerSession = Depends(get_session),
    use_case: GetDailyProgressUseCase = Depends(get_daily_progress_use_case),
) -> DailyProgress:
    return await use_case(session.user_key, date)
