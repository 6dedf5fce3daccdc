"""StopActiveTimer Use Case

Stops whichever timer the user has running. Used on logout or when the
client navigates away.
"""

import logging
from datetime import datetime
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.project_repository import ProjectRepository
from src.domain.time_tracking import close_session, to_utc_naive
from .dtos import TimerStopResponseDTO, to_project_response
from .stop_timer import NO_ACTIVE_TIMER_MESSAGE, TIMER_STOPPED_MESSAGE

logger = logging.getLogger(__name__)


class StopActiveTimer:
    """
    Use Case: Stop the user's active timer

    Business Rules:
    1. No running timer is a benign no-op (stopped=False)
    2. The full elapsed time (now - timer_start_time) is committed
    3. Should several timers be running, all are closed and the earliest
       started one is reported
    """

    def __init__(self, uow: UnitOfWork, project_repo: ProjectRepository):
        self.uow = uow
        self.project_repo = project_repo

    async def execute(self, user_id: str, now: Optional[datetime] = None) -> Result[TimerStopResponseDTO]:
        now = to_utc_naive(now or datetime.utcnow())

        try:
            await self.project_repo.lock_for_user(user_id)

            running = await self.project_repo.get_running_by_user_id(user_id, for_update=True)
            if not running:
                await self.uow.rollback()
                return Return.ok(
                    TimerStopResponseDTO(stopped=False, message=NO_ACTIVE_TIMER_MESSAGE)
                )

            if len(running) > 1:
                logger.warning(
                    f"User {user_id} had {len(running)} running timers; closing all"
                )

            stopped = []
            for project in running:
                committed_ms = close_session(project, now)
                if committed_ms < 0:
                    logger.warning(
                        f"Negative elapsed time {committed_ms}ms while stopping project {project.id} "
                        f"(clock moved backwards?)"
                    )
                stopped.append((await self.project_repo.update(project), committed_ms))

            await self.uow.commit()

            project, committed_ms = stopped[0]
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
            logger.error(f"Failed to stop active timer for user {user_id}: {e}")
            return Return.err(
                Error(
                    code="STOP_ACTIVE_TIMER_FAILED",
                    message="Failed to stop active timer",
                    reason=str(e),
                )
            )
