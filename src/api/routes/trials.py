"""Trial API Routes

Trial sessions are billed per project: the first few are free, every
further one carries a flat extra cost.
"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories import SqlAlchemyProjectRepository, SqlAlchemyTrialRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import raise_for_error
from src.app.use_cases.billing import (
    ListProjectTrials,
    ListTrials,
    RecordTrial,
    RecordTrialCommandDTO,
    TrialResponseDTO,
)
from src.depends import get_current_user_id, get_session

router = APIRouter(prefix="/trials", tags=["Trials"])


@router.post(
    "",
    response_model=TrialResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {
            "description": "Project not found",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "PROJECT_NOT_FOUND",
                            "message": "Project not found"
                        }
                    }
                }
            }
        }
    }
)
async def record_trial(
    command: RecordTrialCommandDTO,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Record a trial session on a project.

    The cost is derived from the number of trials the project already has:
    trials within the free quota cost 0, later ones cost the extra trial
    cost and are flagged `is_extra`.
    """
    use_case = RecordTrial(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyProjectRepository(session),
        SqlAlchemyTrialRepository(session),
        free_quota=ApplicationConfig.TRIAL_FREE_QUOTA,
        extra_cost=ApplicationConfig.TRIAL_EXTRA_COST,
    )
    result = await use_case.execute(user_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", response_model=List[TrialResponseDTO])
async def list_trials(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    result = await ListTrials(SqlAlchemyTrialRepository(session)).execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/project/{project_id}", response_model=List[TrialResponseDTO])
async def list_project_trials(
    project_id: str,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    result = await ListProjectTrials(SqlAlchemyTrialRepository(session)).execute(user_id, project_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
