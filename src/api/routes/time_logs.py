"""Time Log API Routes"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories import SqlAlchemyProjectRepository, SqlAlchemyTimeLogRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import raise_for_error
from src.app.use_cases.time_logs import (
    ListTimeLogs,
    LogTime,
    LogTimeCommandDTO,
    TimeLogResponseDTO,
)
from src.depends import get_current_user_id, get_session

router = APIRouter(prefix="/time-logs", tags=["Time Logs"])


@router.post("", response_model=TimeLogResponseDTO, status_code=status.HTTP_201_CREATED)
async def log_time(
    command: LogTimeCommandDTO,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Record a manual work interval on a project.

    Manual logs are kept apart from the project timer and do not change
    the project's accumulated time.
    """
    use_case = LogTime(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyTimeLogRepository(session),
        SqlAlchemyProjectRepository(session),
    )
    result = await use_case.execute(user_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", response_model=List[TimeLogResponseDTO])
async def list_time_logs(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    result = await ListTimeLogs(SqlAlchemyTimeLogRepository(session)).execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
