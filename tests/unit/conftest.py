import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)
    return uow


@pytest.fixture
def make_project():
    """Factory for Project entities owned by user_1 unless stated otherwise"""
    from src.domain.project import Project

    def _make(project_id="project_a", user_id="user_1", **fields):
        fields.setdefault("client_id", "client_1")
        fields.setdefault("name", f"Project {project_id}")
        fields.setdefault("total_time_spent", 0)
        return Project(id=project_id, user_id=user_id, **fields)

    return _make


@pytest.fixture
def mock_project_repo():
    """Mock project repository whose update() returns the given entity"""
    repo = MagicMock()
    repo.lock_for_user = AsyncMock()
    repo.update = AsyncMock(side_effect=lambda project: project)
    return repo
