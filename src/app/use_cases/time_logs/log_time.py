"""LogTime Use Case

Records a manual work interval against a project. Independent of the
project timer: it neither starts nor stops timers nor changes
total_time_spent.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.project_repository import ProjectRepository
from src.app.repositories.time_log_repository import TimeLogRepository
from src.app.use_cases.authorization import authorize, validation_error
from src.domain.time_log import TimeLog
from src.domain.time_tracking import elapsed_ms, to_utc_naive
from .dtos import LogTimeCommandDTO, TimeLogResponseDTO, to_time_log_response

logger = logging.getLogger(__name__)

MS_PER_MINUTE = Decimal(60_000)


class LogTime:
    """
    Use Case: Log time on a project

    Business Rules:
    1. Project must belong to the user (else PROJECT_NOT_FOUND)
    2. duration_minutes = (end_time or now) - start_time, in minutes
    3. An end before the start is a VALIDATION_ERROR
    """

    def __init__(
        self,
        uow: UnitOfWork,
        time_log_repo: TimeLogRepository,
        project_repo: ProjectRepository,
    ):
        self.uow = uow
        self.time_log_repo = time_log_repo
        self.project_repo = project_repo

    async def execute(
        self, user_id: str, command: LogTimeCommandDTO, now: Optional[datetime] = None
    ) -> Result[TimeLogResponseDTO]:
        start_time = to_utc_naive(command.start_time)
        end_time = to_utc_naive(command.end_time) if command.end_time else None
        interval_end = end_time or to_utc_naive(now or datetime.utcnow())

        duration_ms = elapsed_ms(start_time, interval_end)
        if duration_ms < 0:
            return Return.err(
                validation_error(
                    "end_time must not be before start_time",
                    reason=f"start_time={start_time.isoformat()}, end_time={interval_end.isoformat()}",
                )
            )

        try:
            project = await self.project_repo.get_by_id(command.project_id)
            authorized = authorize(project, user_id, "project")
            if authorized.is_err():
                return authorized

            time_log = TimeLog(
                user_id=user_id,
                project_id=command.project_id,
                task_id=command.task_id,
                description=command.description,
                start_time=start_time,
                end_time=end_time,
                duration_minutes=Decimal(duration_ms) / MS_PER_MINUTE,
            )

            created_log = await self.time_log_repo.create(time_log)
            await self.uow.commit()

            return Return.ok(to_time_log_response(created_log))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to log time for project {command.project_id}: {e}")
            return Return.err(
                Error(
                    code="LOG_TIME_FAILED",
                    message="Failed to log time",
                    reason=str(e),
                )
            )
