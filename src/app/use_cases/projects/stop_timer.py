"""StopTimer Use Case

Stops the running timer of a project and commits the session duration.
"""

import logging
from datetime import datetime
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.project_repository import ProjectRepository
from src.app.use_cases.authorization import authorize, validation_error
from src.domain.time_tracking import close_session, is_running, to_utc_naive
from .dtos import TimerStopResponseDTO, to_project_response

logger = logging.getLogger(__name__)

NO_ACTIVE_TIMER_MESSAGE = "No active timer found"
TIMER_STOPPED_MESSAGE = "Timer stopped and saved"


class StopTimer:
    """
    Use Case: Stop project timer

    Business Rules:
    1. Project must exist and belong to the user (else PROJECT_NOT_FOUND)
    2. No running timer is a benign no-op (stopped=False), not an error
    3. committed_elapsed_ms defaults to now - timer_start_time; an explicit
       value lets the caller commit the duration it displayed
    4. Timer mutations of one user are serialized
    """

    def __init__(self, uow: UnitOfWork, project_repo: ProjectRepository):
        self.uow = uow
        self.project_repo = project_repo

    async def execute(
        self,
        user_id: str,
        project_id: str,
        now: Optional[datetime] = None,
        committed_elapsed_ms: Optional[int] = None,
    ) -> Result[TimerStopResponseDTO]:
        """
        Execute timer stop

        Args:
            user_id: Calling user
            project_id: Project to stop
            now: Stop timestamp (defaults to current UTC time)
            committed_elapsed_ms: Duration to accumulate (must be >= 0)

        Returns:
            Result[TimerStopResponseDTO]
        """
        now = to_utc_naive(now or datetime.utcnow())

        if committed_elapsed_ms is not None and committed_elapsed_ms < 0:
            return Return.err(
                validation_error(
                    "committed_elapsed_ms must be >= 0",
                    reason=f"committed_elapsed_ms={committed_elapsed_ms}",
                )
            )

        try:
            await self.project_repo.lock_for_user(user_id)

            project = await self.project_repo.get_by_id(project_id)
            authorized = authorize(project, user_id, "project")
            if authorized.is_err():
                await self.uow.rollback()
                return authorized

            if not is_running(project):
                # Rollback expires the entity; render it first
                response = TimerStopResponseDTO(
                    stopped=False,
                    message=NO_ACTIVE_TIMER_MESSAGE,
                    project=to_project_response(project, now),
                )
                await self.uow.rollback()
                return Return.ok(response)

            committed_ms = close_session(project, now, committed_elapsed_ms)
            if committed_ms < 0:
                logger.warning(
                    f"Negative elapsed time {committed_ms}ms while stopping project {project.id} "
                    f"(clock moved backwards?)"
                )
            project = await self.project_repo.update(project)

            await self.uow.commit()

            return Return.ok(
                TimerStopResponseDTO(
                    stopped=True,
                    message=TIMER_STOPPED_MESSAGE,
                    committed_ms=committed_ms,
                    project=to_project_response(project, now),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to stop timer for project {project_id}: {e}")
            return Return.err(
                Error(
                    code="STOP_TIMER_FAILED",
                    message="Failed to stop timer",
                    reason=str(e),
                )
            )
