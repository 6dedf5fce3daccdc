"""Data Transfer Objects for Project and Timer Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.project import Project, ProjectStatus
from src.domain.time_tracking import current_elapsed_ms


class CreateProjectCommandDTO(BaseModel):
    """
    Command DTO for creating a project

    Time tracking state is not accepted: new projects start with
    total_time_spent = 0 and no running timer.
    """

    client_id: str = Field(
        ...,
        min_length=1,
        description="Client the project is delivered for"
    )

    name: str = Field(
        ...,
        min_length=1,
        description="Project name"
    )

    description: Optional[str] = Field(default=None)

    status: ProjectStatus = Field(
        default=ProjectStatus.NOT_STARTED,
        description="Initial status"
    )

    start_date: Optional[date] = Field(default=None)

    due_date: Optional[date] = Field(default=None)

    budget: Optional[Decimal] = Field(
        default=None,
        ge=0,
        description="Optional budget (must be >= 0)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": "a1b2c3d4-0000-4000-8000-000000000001",
                "name": "Website redesign",
                "status": "In Progress",
                "budget": "2500.00"
            }
        }


class UpdateProjectCommandDTO(BaseModel):
    """
    Command DTO for updating a project

    Only fields explicitly present are applied. total_time_spent is an
    administrative correction; the timer is driven by the timer use cases.
    """

    client_id: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None)
    status: Optional[ProjectStatus] = Field(default=None)
    start_date: Optional[date] = Field(default=None)
    due_date: Optional[date] = Field(default=None)
    budget: Optional[Decimal] = Field(default=None, ge=0)
    progress: Optional[int] = Field(
        default=None,
        ge=0,
        le=100,
        description="Completion percentage (0-100)"
    )
    total_time_spent: Optional[int] = Field(
        default=None,
        ge=0,
        description="Corrected accumulated time in milliseconds"
    )


class ProjectResponseDTO(BaseModel):
    """Response DTO for a project including live timer state"""

    id: str
    user_id: str
    client_id: str
    name: str
    description: Optional[str] = None
    status: str
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    budget: Optional[Decimal] = None
    progress: int
    total_time_spent: int = Field(
        ...,
        description="Accumulated closed sessions in milliseconds"
    )
    client_name: Optional[str] = Field(
        default=None,
        description="Client name, filled in by the dashboard"
    )
    timer_start_time: Optional[datetime] = None
    is_running: bool
    current_elapsed_ms: int = Field(
        ...,
        description="Length of the running session at response time (not persisted)"
    )
    created_at: datetime
    updated_at: datetime


class TimerStartResponseDTO(BaseModel):
    """Response DTO for StartTimer"""

    project: ProjectResponseDTO
    stopped_project_ids: List[str] = Field(
        default_factory=list,
        description="Projects whose running timer was closed to start this one"
    )


class TimerStopResponseDTO(BaseModel):
    """
    Response DTO for StopTimer and StopActiveTimer

    stopped=False is the benign "no active timer" outcome.
    """

    stopped: bool
    message: str
    committed_ms: Optional[int] = Field(
        default=None,
        description="Milliseconds added to total_time_spent"
    )
    project: Optional[ProjectResponseDTO] = None

    class Config:
        json_schema_extra = {
            "example": {
                "stopped": True,
                "message": "Timer stopped and saved",
                "committed_ms": 3600000,
                "project": None
            }
        }


class DeleteProjectResponseDTO(BaseModel):
    project_id: str
    deleted_trials: int
    message: str = "Project removed"


def to_project_response(project: Project, now: datetime) -> ProjectResponseDTO:
    """Convert a Project entity to its response DTO at time ``now``"""
    return ProjectResponseDTO(
        id=project.id,
        user_id=project.user_id,
        client_id=project.client_id,
        name=project.name,
        description=project.description,
        status=project.status.value if hasattr(project.status, "value") else project.status,
        start_date=project.start_date,
        due_date=project.due_date,
        budget=project.budget,
        progress=project.progress,
        total_time_spent=project.total_time_spent,
        timer_start_time=project.timer_start_time,
        is_running=project.timer_start_time is not None,
        current_elapsed_ms=current_elapsed_ms(project, now),
        created_at=project.created_at,
        updated_at=project.updated_at,
    )
