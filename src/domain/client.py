"""Client Domain Entity

A customer of the freelancer. Projects and invoices reference a client.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import String, Text
from src.domain.base import BaseModel, generate_uuid


class ClientStatus(str, Enum):
    """Client status types"""
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class Client(BaseModel, table=True):
    """
    Client - Customer owned by a single user

    Domain Rules:
    - Every client belongs to exactly one user (user_id)
    - Clients are only visible to their owner
    """

    __tablename__ = "clients"
    __table_args__ = (
        Index('ix_clients_user_id', 'user_id'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Opaque client identifier"
    )

    user_id: str = Field(
        description="Owning user"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Client contact name"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Client contact email"
    )

    phone: Optional[str] = Field(
        default=None,
        sa_column=Column(String(50), nullable=True),
    )

    company_name: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
    )

    address: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    status: ClientStatus = Field(
        default=ClientStatus.ACTIVE,
        description="Client status (Active, Inactive)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Client creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )
