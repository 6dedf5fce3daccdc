from typing import Optional
from fastapi import Header, status
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def get_current_user_id(
    x_user_id: Optional[str] = Header(default=None, alias="X-User-Id"),
) -> str:
    """Authenticated principal, resolved upstream and forwarded as a header"""
    if not x_user_id:
        raise ClientError(
            Error(code="UNAUTHENTICATED", message="Missing X-User-Id header"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return x_user_id
