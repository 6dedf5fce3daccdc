"""Time Log Repository Interface"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.time_log import TimeLog


class TimeLogRepository(ABC):

    @abstractmethod
    async def create(self, time_log: TimeLog) -> TimeLog:
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> List[TimeLog]:
        """Retrieve a user's time logs, latest start first"""
        pass
