"""Project API Routes

FastAPI routes for projects and their single-active timer.
"""

from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyProjectRepository,
    SqlAlchemyTrialRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import raise_for_error
from src.api.schemas.timer_request import StopTimerRequestSchema
from src.app.use_cases.projects import (
    CreateProject,
    CreateProjectCommandDTO,
    DeleteProject,
    DeleteProjectResponseDTO,
    GetProject,
    ListProjects,
    ProjectResponseDTO,
    StartTimer,
    StopActiveTimer,
    StopTimer,
    TimerStartResponseDTO,
    TimerStopResponseDTO,
    UpdateProject,
    UpdateProjectCommandDTO,
)
from src.depends import get_current_user_id, get_session
from src.domain.project import ProjectStatus

router = APIRouter(prefix="/projects", tags=["Projects"])

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Project not found (or owned by another user)",
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


@router.post("", response_model=ProjectResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_project(
    command: CreateProjectCommandDTO,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """Create a project for one of the caller's clients"""
    use_case = CreateProject(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyProjectRepository(session),
        SqlAlchemyClientRepository(session),
    )
    result = await use_case.execute(user_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", response_model=List[ProjectResponseDTO])
async def list_projects(
    status_filter: Optional[ProjectStatus] = Query(default=None, alias="status"),
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """List the caller's projects, most recently updated first"""
    use_case = ListProjects(SqlAlchemyProjectRepository(session))
    result = await use_case.execute(user_id, status=status_filter)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/stop-active",
    response_model=TimerStopResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def stop_active_timer(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Stop whichever timer the caller has running.

    Returns `stopped: false` with message "No active timer found" when
    nothing is running. That outcome is not an error.
    """
    use_case = StopActiveTimer(SqlAlchemyUnitOfWork(session), SqlAlchemyProjectRepository(session))
    result = await use_case.execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{project_id}", response_model=ProjectResponseDTO, responses=NOT_FOUND_RESPONSE)
async def get_project(
    project_id: str,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetProject(SqlAlchemyProjectRepository(session))
    result = await use_case.execute(user_id, project_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{project_id}", response_model=ProjectResponseDTO, responses=NOT_FOUND_RESPONSE)
async def update_project(
    project_id: str,
    command: UpdateProjectCommandDTO,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Update project fields.

    Only fields present in the body are changed. Setting `total_time_spent`
    is an administrative correction of the accumulated time.
    """
    use_case = UpdateProject(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyProjectRepository(session),
        SqlAlchemyClientRepository(session),
    )
    result = await use_case.execute(user_id, project_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{project_id}", response_model=DeleteProjectResponseDTO, responses=NOT_FOUND_RESPONSE)
async def delete_project(
    project_id: str,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """Delete a project together with its trials"""
    use_case = DeleteProject(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyProjectRepository(session),
        SqlAlchemyTrialRepository(session),
    )
    result = await use_case.execute(user_id, project_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{project_id}/timer/start",
    response_model=TimerStartResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def start_timer(
    project_id: str,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Start the timer on a project.

    Any other running timer of the caller is stopped first and its elapsed
    time is added to that project's accumulated time. Starting a project
    that is already running keeps its original start time.

    **Example response:**
    ```json
    {
      "project": {"id": "...", "is_running": true, "total_time_spent": 0, ...},
      "stopped_project_ids": ["..."]
    }
    ```
    """
    use_case = StartTimer(SqlAlchemyUnitOfWork(session), SqlAlchemyProjectRepository(session))
    result = await use_case.execute(user_id, project_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/{project_id}/timer/stop",
    response_model=TimerStopResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def stop_timer(
    project_id: str,
    request: Optional[StopTimerRequestSchema] = Body(default=None),
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Stop the timer on a project.

    **Request body (optional):**
    - `committed_elapsed_ms`: elapsed time the client displayed; when present
      it is committed instead of the server-side measurement
    """
    use_case = StopTimer(SqlAlchemyUnitOfWork(session), SqlAlchemyProjectRepository(session))
    result = await use_case.execute(
        user_id,
        project_id,
        committed_elapsed_ms=request.committed_elapsed_ms if request else None,
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value
