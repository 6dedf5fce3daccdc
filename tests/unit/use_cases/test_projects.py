"""Unit tests for project CRUD use cases"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.projects.create_project import CreateProject
from src.app.use_cases.projects.delete_project import DeleteProject
from src.app.use_cases.projects.dtos import CreateProjectCommandDTO, UpdateProjectCommandDTO
from src.app.use_cases.projects.update_project import UpdateProject
from src.domain.client import Client
from src.domain.project import ProjectStatus


@pytest.fixture
def mock_client_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(
        return_value=Client(id="client_1", user_id="user_1", name="Jane", email="jane@example.com")
    )
    return repo


@pytest.mark.asyncio
class TestCreateProject:
    async def test_new_project_has_no_time(self, mock_uow, mock_project_repo, mock_client_repo):
        mock_project_repo.create = AsyncMock(side_effect=lambda project: project)
        use_case = CreateProject(mock_uow, mock_project_repo, mock_client_repo)

        result = await use_case.execute(
            "user_1", CreateProjectCommandDTO(client_id="client_1", name="Website")
        )

        assert result.is_ok()
        assert result.value.total_time_spent == 0
        assert result.value.is_running is False
        assert result.value.status == "Not Started"
        mock_uow.commit.assert_awaited_once()

    async def test_foreign_client(self, mock_uow, mock_project_repo, mock_client_repo):
        mock_client_repo.get_by_id = AsyncMock(
            return_value=Client(id="client_1", user_id="user_2", name="Jane", email="jane@example.com")
        )
        mock_project_repo.create = AsyncMock()
        use_case = CreateProject(mock_uow, mock_project_repo, mock_client_repo)

        result = await use_case.execute(
            "user_1", CreateProjectCommandDTO(client_id="client_1", name="Website")
        )

        assert result.is_err()
        assert result.error.code == "CLIENT_NOT_FOUND"
        mock_project_repo.create.assert_not_awaited()


@pytest.mark.asyncio
class TestUpdateProject:
    async def test_partial_update(self, mock_uow, mock_project_repo, mock_client_repo, make_project):
        project = make_project(total_time_spent=5000)
        mock_project_repo.get_by_id = AsyncMock(return_value=project)
        use_case = UpdateProject(mock_uow, mock_project_repo, mock_client_repo)

        result = await use_case.execute(
            "user_1", "project_a", UpdateProjectCommandDTO(status=ProjectStatus.IN_PROGRESS, progress=40)
        )

        assert result.is_ok()
        assert result.value.status == "In Progress"
        assert result.value.progress == 40
        assert result.value.total_time_spent == 5000
        mock_client_repo.get_by_id.assert_not_awaited()

    async def test_time_correction(self, mock_uow, mock_project_repo, mock_client_repo, make_project):
        project = make_project(total_time_spent=5000)
        mock_project_repo.get_by_id = AsyncMock(return_value=project)
        use_case = UpdateProject(mock_uow, mock_project_repo, mock_client_repo)

        result = await use_case.execute(
            "user_1", "project_a", UpdateProjectCommandDTO(total_time_spent=3_600_000)
        )

        assert result.value.total_time_spent == 3_600_000

    async def test_missing_project(self, mock_uow, mock_project_repo, mock_client_repo):
        mock_project_repo.get_by_id = AsyncMock(return_value=None)
        use_case = UpdateProject(mock_uow, mock_project_repo, mock_client_repo)

        result = await use_case.execute("user_1", "missing", UpdateProjectCommandDTO(name="New"))

        assert result.is_err()
        assert result.error.code == "PROJECT_NOT_FOUND"


@pytest.mark.asyncio
class TestDeleteProject:
    async def test_deletes_trials_then_project(self, mock_uow, mock_project_repo, make_project):
        project = make_project()
        mock_project_repo.get_by_id = AsyncMock(return_value=project)
        mock_project_repo.delete = AsyncMock()
        trial_repo = MagicMock()
        trial_repo.delete_by_project_id = AsyncMock(return_value=4)
        use_case = DeleteProject(mock_uow, mock_project_repo, trial_repo)

        result = await use_case.execute("user_1", "project_a")

        assert result.is_ok()
        assert result.value.deleted_trials == 4
        trial_repo.delete_by_project_id.assert_awaited_once_with("project_a")
        mock_project_repo.delete.assert_awaited_once_with(project)
        mock_uow.commit.assert_awaited_once()

    async def test_foreign_project_is_untouched(self, mock_uow, mock_project_repo, make_project):
        mock_project_repo.get_by_id = AsyncMock(return_value=make_project(user_id="user_2"))
        mock_project_repo.delete = AsyncMock()
        trial_repo = MagicMock()
        trial_repo.delete_by_project_id = AsyncMock()
        use_case = DeleteProject(mock_uow, mock_project_repo, trial_repo)

        result = await use_case.execute("user_1", "project_a")

        assert result.is_err()
        assert result.error.code == "PROJECT_NOT_FOUND"
        trial_repo.delete_by_project_id.assert_not_awaited()
        mock_project_repo.delete.assert_not_awaited()
