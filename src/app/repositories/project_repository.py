"""Project Repository Interface

Defines the contract for project persistence, including the locking
primitives that serialize timer mutations per user.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.project import Project, ProjectStatus


class ProjectRepository(ABC):
    """
    Repository interface for Project persistence

    Timer mutations must call lock_for_user() first so that
    read-active -> close-it -> write-new-start is atomic with respect to
    other timer mutations of the same user.
    """

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """
        Create a new project

        Args:
            project: Project entity to persist

        Returns:
            Created Project
        """
        pass

    @abstractmethod
    async def get_by_id(self, project_id: str, for_update: bool = False) -> Optional[Project]:
        """
        Retrieve project by ID (regardless of owner)

        Args:
            project_id: Project ID
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            Project if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_user_id(
        self,
        user_id: str,
        status: Optional[ProjectStatus] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Project]:
        """
        Retrieve projects of a user, most recently updated first

        Args:
            user_id: Owning user
            status: Optional filter by status
            limit: Maximum number of projects (None = all)
            offset: Offset for pagination

        Returns:
            List of projects
        """
        pass

    @abstractmethod
    async def count_by_user_id(self, user_id: str, status: Optional[ProjectStatus] = None) -> int:
        """Count projects of a user, optionally filtered by status"""
        pass

    @abstractmethod
    async def count_by_client_id(self, client_id: str) -> int:
        """Count projects that reference a client"""
        pass

    @abstractmethod
    async def lock_for_user(self, user_id: str) -> None:
        """
        Lock all project rows of a user (SELECT FOR UPDATE)

        Held until the surrounding transaction commits or rolls back.
        """
        pass

    @abstractmethod
    async def get_running_by_user_id(self, user_id: str, for_update: bool = False) -> List[Project]:
        """
        Retrieve the user's projects with a running timer, earliest start first

        At most one is expected; callers close every returned project
        so a violated invariant heals on the next timer mutation.
        """
        pass

    @abstractmethod
    async def update(self, project: Project) -> Project:
        """
        Persist changes to a project and flush immediately

        Flushing per call keeps UPDATE statements in call order, which the
        running-timer unique index relies on when switching timers.
        """
        pass

    @abstractmethod
    async def delete(self, project: Project) -> None:
        """Delete a project"""
        pass
