"""SQLAlchemy implementation of ProjectRepository

Provides persistence for Project entities with pessimistic locking support
so that timer switches of one user are serialized.
"""

from datetime import datetime
from typing import List, Optional
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.project_repository import ProjectRepository
from src.domain.project import Project, ProjectStatus


class SqlAlchemyProjectRepository(ProjectRepository):
    """
    SQLAlchemy implementation of ProjectRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE (ignored by SQLite,
      which serializes writers at the database level)
    - Flush per update so statement order follows call order
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, project: Project) -> Project:
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def get_by_id(self, project_id: str, for_update: bool = False) -> Optional[Project]:
        """
        Retrieve project by ID with optional row-level locking

        Args:
            project_id: Project ID
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            Project if found, None otherwise
        """
        stmt = select(Project).where(Project.id == project_id)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_id(
        self,
        user_id: str,
        status: Optional[ProjectStatus] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Project]:
        stmt = select(Project).where(Project.user_id == user_id)

        if status:
            stmt = stmt.where(Project.status == status)

        stmt = stmt.order_by(Project.updated_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset:
            stmt = stmt.offset(offset)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_user_id(self, user_id: str, status: Optional[ProjectStatus] = None) -> int:
        stmt = select(func.count()).select_from(Project).where(Project.user_id == user_id)
        if status:
            stmt = stmt.where(Project.status == status)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_client_id(self, client_id: str) -> int:
        stmt = select(func.count()).select_from(Project).where(Project.client_id == client_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def lock_for_user(self, user_id: str) -> None:
        """
        Lock every project row of the user until the transaction ends

        Note:
            A user without projects acquires no row lock; such a user has
            no timer to race on.
        """
        stmt = select(Project.id).where(Project.user_id == user_id).with_for_update()
        await self.session.execute(stmt)

    async def get_running_by_user_id(self, user_id: str, for_update: bool = False) -> List[Project]:
        stmt = (
            select(Project)
            .where(Project.user_id == user_id)
            .where(Project.timer_start_time.is_not(None))
            .order_by(Project.timer_start_time)
        )

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def update(self, project: Project) -> Project:
        project.updated_at = datetime.utcnow()
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def delete(self, project: Project) -> None:
        await self.session.delete(project)
        await self.session.flush()
