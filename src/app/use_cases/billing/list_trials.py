"""List Trials Use Cases

Trials of one project, or every trial of the user, newest first.
"""

from typing import List
from libs.result import Result, Return
from src.app.repositories.trial_repository import TrialRepository
from .dtos import TrialResponseDTO, to_trial_response


class ListProjectTrials:
    """
    Lists a user's trials for a project

    Returns an empty list for unknown or deleted projects, as the query is
    scoped to the user's own trials.
    """

    def __init__(self, trial_repo: TrialRepository):
        self.trial_repo = trial_repo

    async def execute(self, user_id: str, project_id: str) -> Result[List[TrialResponseDTO]]:
        trials = await self.trial_repo.get_by_project_id(project_id, user_id)
        return Return.ok([to_trial_response(trial) for trial in trials])


class ListTrials:
    def __init__(self, trial_repo: TrialRepository):
        self.trial_repo = trial_repo

    async def execute(self, user_id: str) -> Result[List[TrialResponseDTO]]:
        trials = await self.trial_repo.get_by_user_id(user_id)
        return Return.ok([to_trial_response(trial) for trial in trials])
