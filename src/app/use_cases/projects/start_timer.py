"""StartTimer Use Case

Starts the timer of a project. Any other running timer of the same user
is closed first, so at most one timer per user runs at any instant.
"""

import logging
from datetime import datetime
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.project_repository import ProjectRepository
from src.app.use_cases.authorization import authorize
from src.domain.time_tracking import close_session, is_running, start_session, to_utc_naive
from .dtos import TimerStartResponseDTO, to_project_response

logger = logging.getLogger(__name__)


class StartTimer:
    """
    Use Case: Start project timer

    Business Rules:
    1. Project must exist and belong to the user (else PROJECT_NOT_FOUND)
    2. Competing timers are force-stopped and saved, never rejected
    3. Starting an already running timer keeps its original start time
    4. Timer mutations of one user are serialized (row lock on the user's projects)

    Flow:
    1. Lock the user's projects (SELECT FOR UPDATE)
    2. Load and authorize target project
    3. Close every other running session: total_time_spent += now - start
    4. Set target timer_start_time = now
    5. Commit transaction
    """

    def __init__(self, uow: UnitOfWork, project_repo: ProjectRepository):
        self.uow = uow
        self.project_repo = project_repo

    async def execute(
        self, user_id: str, project_id: str, now: Optional[datetime] = None
    ) -> Result[TimerStartResponseDTO]:
        """
        Execute timer start

        Args:
            user_id: Calling user
            project_id: Project to start
            now: Start timestamp (defaults to current UTC time)

        Returns:
            Result[TimerStartResponseDTO]: Started project and force-stopped project ids
        """
        now = to_utc_naive(now or datetime.utcnow())

        try:
            # Step 1: Serialize timer mutations of this user
            await self.project_repo.lock_for_user(user_id)

            # Step 2: Load and authorize target
            project = await self.project_repo.get_by_id(project_id)
            authorized = authorize(project, user_id, "project")
            if authorized.is_err():
                await self.uow.rollback()
                return authorized

            # Step 3: Close competing sessions
            stopped_project_ids = []
            for running in await self.project_repo.get_running_by_user_id(user_id, for_update=True):
                if running.id == project.id:
                    continue

                committed_ms = close_session(running, now)
                if committed_ms < 0:
                    logger.warning(
                        f"Negative elapsed time {committed_ms}ms while closing project {running.id} "
                        f"(clock moved backwards?)"
                    )
                await self.project_repo.update(running)
                stopped_project_ids.append(running.id)
                logger.info(
                    f"Switched timer for user {user_id}: stopped project {running.id} "
                    f"(+{committed_ms}ms), starting project {project.id}"
                )

            # Step 4: Start target unless it is already running
            if not is_running(project):
                start_session(project, now)
                project = await self.project_repo.update(project)

            # Step 5: Commit transaction
            await self.uow.commit()

            return Return.ok(
                TimerStartResponseDTO(
                    project=to_project_response(project, now),
                    stopped_project_ids=stopped_project_ids,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to start timer for project {project_id}: {e}")
            return Return.err(
                Error(
                    code="START_TIMER_FAILED",
                    message="Failed to start timer",
                    reason=str(e),
                )
            )
