"""UpdateProject Use Case

Applies descriptive edits and administrative corrections to a project.
The running timer is not editable here; StartTimer/StopTimer own it.
"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.project_repository import ProjectRepository
from src.app.use_cases.authorization import authorize
from .dtos import ProjectResponseDTO, UpdateProjectCommandDTO, to_project_response

logger = logging.getLogger(__name__)


class UpdateProject:
    """
    Use Case: Update project fields

    Business Rules:
    1. Project must belong to the user (else PROJECT_NOT_FOUND)
    2. Only fields present in the command are applied; explicit 0 values count
    3. Moving a project to another client requires owning that client
    4. total_time_spent edits are administrative corrections and are logged
    """

    def __init__(
        self,
        uow: UnitOfWork,
        project_repo: ProjectRepository,
        client_repo: ClientRepository,
    ):
        self.uow = uow
        self.project_repo = project_repo
        self.client_repo = client_repo

    async def execute(
        self, user_id: str, project_id: str, command: UpdateProjectCommandDTO
    ) -> Result[ProjectResponseDTO]:
        try:
            project = await self.project_repo.get_by_id(project_id)
            authorized = authorize(project, user_id, "project")
            if authorized.is_err():
                return authorized

            changes = command.model_dump(exclude_unset=True)

            if changes.get("client_id") and changes["client_id"] != project.client_id:
                client = await self.client_repo.get_by_id(changes["client_id"])
                client_authorized = authorize(client, user_id, "client")
                if client_authorized.is_err():
                    return client_authorized

            if "total_time_spent" in changes and changes["total_time_spent"] != project.total_time_spent:
                logger.info(
                    f"Administrative correction of project {project.id} total_time_spent: "
                    f"{project.total_time_spent} -> {changes['total_time_spent']}"
                )

            for field, value in changes.items():
                if value is None and field in ("client_id", "name", "status", "progress", "total_time_spent"):
                    continue
                setattr(project, field, value)

            updated_project = await self.project_repo.update(project)

            await self.uow.commit()

            return Return.ok(to_project_response(updated_project, datetime.utcnow()))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update project {project_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_PROJECT_FAILED",
                    message="Failed to update project",
                    reason=str(e),
                )
            )
