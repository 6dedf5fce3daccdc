"""Unit tests for RecordTrial use case

Tests cover:
- Free trials within the quota
- Extra trials past the quota
- Configured quota and cost
- Ownership and failure handling
"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.billing.dtos import RecordTrialCommandDTO
from src.app.use_cases.billing.record_trial import RecordTrial


@pytest.fixture
def mock_trial_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=lambda trial: trial)
    return repo


@pytest.fixture
def record_trial(mock_uow, mock_project_repo, mock_trial_repo):
    return RecordTrial(uow=mock_uow, project_repo=mock_project_repo, trial_repo=mock_trial_repo)


@pytest.fixture
def command():
    return RecordTrialCommandDTO(project_id="project_a", notes="Logo review")


@pytest.mark.asyncio
class TestRecordTrial:
    @pytest.mark.parametrize("existing", [0, 1, 2])
    async def test_first_three_trials_are_free(
        self, existing, record_trial, mock_project_repo, mock_trial_repo, mock_uow, command, make_project
    ):
        mock_project_repo.get_by_id = AsyncMock(return_value=make_project())
        mock_trial_repo.count_by_project_id = AsyncMock(return_value=existing)

        result = await record_trial.execute("user_1", command)

        assert result.is_ok()
        assert result.value.cost == Decimal("0")
        assert result.value.is_extra is False
        assert result.value.notes == "Logo review"
        mock_uow.commit.assert_awaited_once()

    async def test_fourth_trial_is_extra(
        self, record_trial, mock_project_repo, mock_trial_repo, command, make_project
    ):
        mock_project_repo.get_by_id = AsyncMock(return_value=make_project())
        mock_trial_repo.count_by_project_id = AsyncMock(return_value=3)

        result = await record_trial.execute("user_1", command)

        assert result.is_ok()
        assert result.value.cost == Decimal("10.00")
        assert result.value.is_extra is True

    async def test_project_row_is_locked_before_counting(
        self, record_trial, mock_project_repo, mock_trial_repo, command, make_project
    ):
        mock_project_repo.get_by_id = AsyncMock(return_value=make_project())
        mock_trial_repo.count_by_project_id = AsyncMock(return_value=0)

        await record_trial.execute("user_1", command)

        mock_project_repo.get_by_id.assert_awaited_once_with("project_a", for_update=True)
        mock_trial_repo.count_by_project_id.assert_awaited_once_with("project_a")

    async def test_configured_quota_and_cost(
        self, mock_uow, mock_project_repo, mock_trial_repo, command, make_project
    ):
        use_case = RecordTrial(
            uow=mock_uow,
            project_repo=mock_project_repo,
            trial_repo=mock_trial_repo,
            free_quota=1,
            extra_cost="25.00",
        )
        mock_project_repo.get_by_id = AsyncMock(return_value=make_project())
        mock_trial_repo.count_by_project_id = AsyncMock(return_value=1)

        result = await use_case.execute("user_1", command)

        assert result.value.cost == Decimal("25.00")
        assert result.value.is_extra is True

    async def test_foreign_project(self, record_trial, mock_project_repo, mock_trial_repo, mock_uow, command, make_project):
        mock_project_repo.get_by_id = AsyncMock(return_value=make_project(user_id="user_2"))
        mock_trial_repo.count_by_project_id = AsyncMock()

        result = await record_trial.execute("user_1", command)

        assert result.is_err()
        assert result.error.code == "PROJECT_NOT_FOUND"
        mock_trial_repo.count_by_project_id.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    async def test_create_failure_rolls_back(
        self, record_trial, mock_project_repo, mock_trial_repo, mock_uow, command, make_project
    ):
        mock_project_repo.get_by_id = AsyncMock(return_value=make_project())
        mock_trial_repo.count_by_project_id = AsyncMock(return_value=0)
        mock_trial_repo.create = AsyncMock(side_effect=Exception("Database error"))

        result = await record_trial.execute("user_1", command)

        assert result.is_err()
        assert result.error.code == "RECORD_TRIAL_FAILED"
        mock_uow.rollback.assert_awaited_once()
