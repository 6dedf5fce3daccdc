"""Trial Domain Entity

Append-only record of a trial session delivered for a project.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Boolean, ForeignKey, Numeric, String, Text
from src.domain.base import BaseModel, generate_uuid


class Trial(BaseModel, table=True):
    """
    Trial - Immutable fact about one trial session

    Domain Rules:
    - cost and is_extra are fixed at creation by the trial pricing policy
    - Trials are never updated
    - Trials are deleted only together with their project
    """

    __tablename__ = "trials"
    __table_args__ = (
        Index('ix_trials_project_id', 'project_id'),
        Index('ix_trials_user_date', 'user_id', 'date'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Opaque trial identifier"
    )

    user_id: str = Field(
        description="Owning user"
    )

    project_id: str = Field(
        sa_column=Column(String(36), ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
        description="Project the trial belongs to"
    )

    date: datetime = Field(
        default_factory=datetime.utcnow,
        description="When the trial took place"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    cost: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Charged amount (0 for free-tier trials)"
    )

    is_extra: bool = Field(
        sa_column=Column(Boolean, nullable=False, default=False),
        description="True when the trial exceeded the free quota"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Record creation timestamp (immutable)"
    )
