"""GetProject Use Case"""

from datetime import datetime
from typing import Optional
from libs.result import Result, Return
from src.app.repositories.project_repository import ProjectRepository
from src.app.use_cases.authorization import authorize
from src.domain.time_tracking import to_utc_naive
from .dtos import ProjectResponseDTO, to_project_response


class GetProject:
    """Read-only lookup of one project; foreign projects are PROJECT_NOT_FOUND"""

    def __init__(self, project_repo: ProjectRepository):
        self.project_repo = project_repo

    async def execute(
        self, user_id: str, project_id: str, now: Optional[datetime] = None
    ) -> Result[ProjectResponseDTO]:
        project = await self.project_repo.get_by_id(project_id)
        authorized = authorize(project, user_id, "project")
        if authorized.is_err():
            return authorized

        return Return.ok(to_project_response(project, to_utc_naive(now or datetime.utcnow())))
