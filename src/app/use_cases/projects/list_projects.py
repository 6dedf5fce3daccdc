"""ListProjects Use Case"""

from datetime import datetime
from typing import List, Optional
from libs.result import Result, Return
from src.app.repositories.project_repository import ProjectRepository
from src.domain.project import ProjectStatus
from src.domain.time_tracking import to_utc_naive
from .dtos import ProjectResponseDTO, to_project_response


class ListProjects:
    """Lists the user's projects, most recently updated first"""

    def __init__(self, project_repo: ProjectRepository):
        self.project_repo = project_repo

    async def execute(
        self,
        user_id: str,
        status: Optional[ProjectStatus] = None,
        now: Optional[datetime] = None,
    ) -> Result[List[ProjectResponseDTO]]:
        now = to_utc_naive(now or datetime.utcnow())
        projects = await self.project_repo.get_by_user_id(user_id, status=status)
        return Return.ok([to_project_response(project, now) for project in projects])
