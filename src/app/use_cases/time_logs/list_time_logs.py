"""ListTimeLogs Use Case"""

from typing import List
from libs.result import Result, Return
from src.app.repositories.time_log_repository import TimeLogRepository
from .dtos import TimeLogResponseDTO, to_time_log_response


class ListTimeLogs:
    def __init__(self, time_log_repo: TimeLogRepository):
        self.time_log_repo = time_log_repo

    async def execute(self, user_id: str) -> Result[List[TimeLogResponseDTO]]:
        logs = await self.time_log_repo.get_by_user_id(user_id)
        return Return.ok([to_time_log_response(log) for log in logs])
