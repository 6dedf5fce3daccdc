"""Project Domain Entity

Owns the per-project time accumulation state and the running timer.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, CheckConstraint, Date, ForeignKey, Numeric, String, Text, text
from src.domain.base import BaseModel, generate_uuid


class ProjectStatus(str, Enum):
    """Project status types"""
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"
    PENDING = "Pending"
    PAUSED = "Paused"


class Project(BaseModel, table=True):
    """
    Project - Client engagement with time tracking

    Domain Rules:
    - total_time_spent holds closed sessions only (milliseconds)
    - timer_start_time is set iff a session is currently running
    - At most one project per user has a running timer
      (partial unique index uq_projects_user_running_timer)
    - total_time_spent only grows when a running session is stopped,
      except for explicit administrative correction
    - Deleting a project deletes its trials
    """

    __tablename__ = "projects"
    __table_args__ = (
        Index('ix_projects_user_id', 'user_id'),
        Index('ix_projects_user_status', 'user_id', 'status'),
        Index(
            'uq_projects_user_running_timer',
            'user_id',
            unique=True,
            postgresql_where=text('timer_start_time IS NOT NULL'),
            sqlite_where=text('timer_start_time IS NOT NULL'),
        ),
        CheckConstraint('progress >= 0 AND progress <= 100', name='progress_in_range'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Opaque project identifier"
    )

    user_id: str = Field(
        description="Owning user"
    )

    client_id: str = Field(
        sa_column=Column(String(36), ForeignKey("clients.id"), nullable=False),
        description="Client this project is delivered for"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Project name"
    )

    description: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    status: ProjectStatus = Field(
        default=ProjectStatus.NOT_STARTED,
        description="Project status"
    )

    start_date: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
    )

    due_date: Optional[date] = Field(
        default=None,
        sa_column=Column(Date, nullable=True),
    )

    budget: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(18, 6), nullable=True),
        description="Optional project budget (precision: 18,6)"
    )

    progress: int = Field(
        default=0,
        description="Completion percentage (0-100)"
    )

    total_time_spent: int = Field(
        default=0,
        sa_column=Column(BigInteger, nullable=False, default=0),
        description="Accumulated time of closed sessions in milliseconds"
    )

    timer_start_time: Optional[datetime] = Field(
        default=None,
        description="Start of the running session (None = no timer running)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Project creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "3f6c1a52-8a0e-4f0b-9d43-5a2f1d7c9e10",
                "user_id": "user_123",
                "client_id": "a1b2c3d4-0000-4000-8000-000000000001",
                "name": "Website redesign",
                "status": "In Progress",
                "progress": 40,
                "total_time_spent": 3600000,
                "timer_start_time": None,
                "created_at": "2024-01-01T00:00:00Z",
                "updated_at": "2024-01-01T00:00:00Z"
            }
        }
