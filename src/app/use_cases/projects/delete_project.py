"""DeleteProject Use Case

Deletes a project together with its trial records.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.project_repository import ProjectRepository
from src.app.repositories.trial_repository import TrialRepository
from src.app.use_cases.authorization import authorize
from .dtos import DeleteProjectResponseDTO

logger = logging.getLogger(__name__)


class DeleteProject:
    """
    Use Case: Delete project

    Business Rules:
    1. Project must belong to the user (else PROJECT_NOT_FOUND)
    2. All trials of the project are deleted in the same transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        project_repo: ProjectRepository,
        trial_repo: TrialRepository,
    ):
        self.uow = uow
        self.project_repo = project_repo
        self.trial_repo = trial_repo

    async def execute(self, user_id: str, project_id: str) -> Result[DeleteProjectResponseDTO]:
        try:
            project = await self.project_repo.get_by_id(project_id, for_update=True)
            authorized = authorize(project, user_id, "project")
            if authorized.is_err():
                await self.uow.rollback()
                return authorized

            deleted_trials = await self.trial_repo.delete_by_project_id(project.id)
            await self.project_repo.delete(project)

            await self.uow.commit()

            logger.info(f"Deleted project {project_id} and {deleted_trials} trials")
            return Return.ok(
                DeleteProjectResponseDTO(project_id=project_id, deleted_trials=deleted_trials)
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete project {project_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_PROJECT_FAILED",
                    message="Failed to delete project",
                    reason=str(e),
                )
            )
