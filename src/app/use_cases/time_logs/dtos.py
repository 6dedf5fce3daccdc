"""Data Transfer Objects for Time Log Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field
from src.domain.time_log import TimeLog


class LogTimeCommandDTO(BaseModel):
    """
    Command DTO for recording a work interval

    end_time may be omitted; the interval then ends at the time of the call.
    """

    project_id: str = Field(..., min_length=1)
    task_id: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    start_time: datetime = Field(..., description="Start of the interval")
    end_time: Optional[datetime] = Field(default=None, description="End of the interval")

    class Config:
        json_schema_extra = {
            "example": {
                "project_id": "3f6c1a52-8a0e-4f0b-9d43-5a2f1d7c9e10",
                "description": "Wireframes",
                "start_time": "2024-01-01T09:00:00Z",
                "end_time": "2024-01-01T10:30:00Z"
            }
        }


class TimeLogResponseDTO(BaseModel):
    id: str
    user_id: str
    project_id: str
    task_id: Optional[str] = None
    description: Optional[str] = None
    start_time: datetime
    end_time: Optional[datetime] = None
    duration_minutes: Decimal
    created_at: datetime


def to_time_log_response(time_log: TimeLog) -> TimeLogResponseDTO:
    return TimeLogResponseDTO(
        id=time_log.id,
        user_id=time_log.user_id,
        project_id=time_log.project_id,
        task_id=time_log.task_id,
        description=time_log.description,
        start_time=time_log.start_time,
        end_time=time_log.end_time,
        duration_minutes=time_log.duration_minutes,
        created_at=time_log.created_at,
    )
