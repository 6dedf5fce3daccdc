"""SQLAlchemy Time Log Repository Implementation"""

from typing import List
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.time_log_repository import TimeLogRepository
from src.domain.time_log import TimeLog


class SqlAlchemyTimeLogRepository(TimeLogRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, time_log: TimeLog) -> TimeLog:
        self.session.add(time_log)
        await self.session.flush()
        await self.session.refresh(time_log)
        return time_log

    async def get_by_user_id(self, user_id: str) -> List[TimeLog]:
        statement = (
            select(TimeLog)
            .where(TimeLog.user_id == user_id)
            .order_by(TimeLog.start_time.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
