"""SQLAlchemy Client Repository Implementation"""

from datetime import datetime
from typing import List, Optional
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.client_repository import ClientRepository
from src.domain.client import Client


class SqlAlchemyClientRepository(ClientRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, client: Client) -> Client:
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def get_by_id(self, client_id: str) -> Optional[Client]:
        statement = select(Client).where(Client.id == client_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_user_id(self, user_id: str) -> List[Client]:
        statement = (
            select(Client)
            .where(Client.user_id == user_id)
            .order_by(Client.created_at.desc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count_by_user_id(self, user_id: str) -> int:
        statement = select(func.count()).select_from(Client).where(Client.user_id == user_id)
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def update(self, client: Client) -> Client:
        client.updated_at = datetime.utcnow()
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def delete(self, client: Client) -> None:
        await self.session.delete(client)
        await self.session.flush()
