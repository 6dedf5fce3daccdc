"""Project and time tracking use cases"""
from .create_project import CreateProject
from .get_project import GetProject
from .list_projects import ListProjects
from .update_project import UpdateProject
from .delete_project import DeleteProject
from .start_timer import StartTimer
from .stop_timer import StopTimer
from .stop_active_timer import StopActiveTimer
from .dtos import (
    CreateProjectCommandDTO,
    UpdateProjectCommandDTO,
    ProjectResponseDTO,
    TimerStartResponseDTO,
    TimerStopResponseDTO,
    DeleteProjectResponseDTO,
)

__all__ = [
    "CreateProject",
    "GetProject",
    "ListProjects",
    "UpdateProject",
    "DeleteProject",
    "StartTimer",
    "StopTimer",
    "StopActiveTimer",
    "CreateProjectCommandDTO",
    "UpdateProjectCommandDTO",
    "ProjectResponseDTO",
    "TimerStartResponseDTO",
    "TimerStopResponseDTO",
    "DeleteProjectResponseDTO",
]
