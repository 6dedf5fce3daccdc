"""Trial Repository Interface

Defines the contract for the append-only trial ledger.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.trial import Trial


class TrialRepository(ABC):
    """
    Repository interface for Trial persistence

    Trials are immutable: there is no update operation.
    """

    @abstractmethod
    async def create(self, trial: Trial) -> Trial:
        """
        Create a new trial record

        Args:
            trial: Trial entity to persist

        Returns:
            Created Trial
        """
        pass

    @abstractmethod
    async def count_by_project_id(self, project_id: str) -> int:
        """
        Count trials already recorded for a project

        Args:
            project_id: Project ID

        Returns:
            Number of trials
        """
        pass

    @abstractmethod
    async def get_by_project_id(self, project_id: str, user_id: str) -> List[Trial]:
        """Retrieve a user's trials for a project, newest first"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> List[Trial]:
        """Retrieve all trials of a user, newest first"""
        pass

    @abstractmethod
    async def delete_by_project_id(self, project_id: str) -> int:
        """
        Delete every trial of a project

        Returns:
            Number of deleted trials
        """
        pass
