"""CreateProject Use Case"""

import logging
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.project_repository import ProjectRepository
from src.app.use_cases.authorization import authorize
from src.domain.project import Project
from .dtos import CreateProjectCommandDTO, ProjectResponseDTO, to_project_response

logger = logging.getLogger(__name__)


class CreateProject:
    """
    Use Case: Create a project for one of the user's clients

    Business Rules:
    1. Client must belong to the user (else CLIENT_NOT_FOUND)
    2. Project starts with progress 0, total_time_spent 0, no running timer
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

    async def execute(self, user_id: str, command: CreateProjectCommandDTO) -> Result[ProjectResponseDTO]:
        try:
            client = await self.client_repo.get_by_id(command.client_id)
            authorized = authorize(client, user_id, "client")
            if authorized.is_err():
                return authorized

            project = Project(
                user_id=user_id,
                client_id=command.client_id,
                name=command.name,
                description=command.description,
                status=command.status,
                start_date=command.start_date,
                due_date=command.due_date,
                budget=command.budget,
                progress=0,
                total_time_spent=0,
                timer_start_time=None,
            )

            created_project = await self.project_repo.create(project)

            await self.uow.commit()

            return Return.ok(to_project_response(created_project, datetime.utcnow()))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create project for user {user_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_PROJECT_FAILED",
                    message="Failed to create project",
                    reason=str(e),
                )
            )
