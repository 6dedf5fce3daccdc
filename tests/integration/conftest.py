import os
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401
from src.depends import get_session
from src.domain.client import Client
from src.domain.project import Project


@pytest_asyncio.fixture(scope="function")
async def engine(tmp_path):
    """Test database engine; a fresh SQLite file per test unless TEST_DB_URL is set"""
    test_db_url = os.environ.get("TEST_DB_URL", f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")

    engine = create_async_engine(test_db_url, echo=False, future=True)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with database session override"""
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def seed(db_session):
    """Factory inserting a client with projects for a user"""

    async def _seed(user_id="user_1", project_names=("Website",)):
        client = Client(user_id=user_id, name="Jane Doe", email=f"{user_id}@example.com")
        db_session.add(client)
        await db_session.flush()

        projects = []
        for name in project_names:
            project = Project(user_id=user_id, client_id=client.id, name=name)
            db_session.add(project)
            projects.append(project)

        await db_session.commit()
        return client, projects

    return _seed
