"""SQLAlchemy Trial Repository Implementation"""

from typing import List
from sqlalchemy import delete
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.trial_repository import TrialRepository
from src.domain.trial import Trial


class SqlAlchemyTrialRepository(TrialRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, trial: Trial) -> Trial:
        self.session.add(trial)
        await self.session.flush()
        await self.session.refresh(trial)
        return trial

    async def count_by_project_id(self, project_id: str) -> int:
        statement = select(func.count()).select_from(Trial).where(Trial.project_id == project_id)
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def get_by_project_id(self, project_id: str, user_id: str) -> List[Trial]:
        statement = (
            select(Trial)
            .where(Trial.project_id == project_id)
            .where(Trial.user_id == user_id)
            .order_by(Trial.date.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_user_id(self, user_id: str) -> List[Trial]:
        statement = (
            select(Trial)
            .where(Trial.user_id == user_id)
            .order_by(Trial.date.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def delete_by_project_id(self, project_id: str) -> int:
        statement = delete(Trial).where(Trial.project_id == project_id)
        result = await self.session.execute(statement)
        await self.session.flush()
        return result.rowcount or 0
