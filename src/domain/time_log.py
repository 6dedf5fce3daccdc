"""Time Log Domain Entity

Manually recorded work interval, independent of the project timer.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Text
from src.domain.base import BaseModel, generate_uuid


class TimeLog(BaseModel, table=True):
    __tablename__ = "time_logs"
    __table_args__ = (
        Index('ix_time_logs_user_start', 'user_id', 'start_time'),
        Index('ix_time_logs_project_id', 'project_id'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
    )

    user_id: str = Field(
        description="Owning user"
    )

    project_id: str = Field(
        sa_column=Column(String(36), nullable=False),
        description="Project the time was spent on"
    )

    task_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(36), nullable=True),
        description="Optional task within the project"
    )

    description: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    start_time: datetime = Field(
        description="Start of the logged interval"
    )

    end_time: Optional[datetime] = Field(
        default=None,
        description="End of the logged interval (None = logged while running)"
    )

    duration_minutes: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Interval length in minutes"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
    )
