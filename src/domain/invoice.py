"""Invoice Domain Entity

Tracks invoices issued to clients and their derived totals.
"""

import re
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Date, ForeignKey, Numeric, String, Text
from src.domain.base import BaseModel, generate_uuid

INVOICE_NUMBER_PREFIX = "INV-"
SEQUENCE_DIGITS = 6
GENERATED_NUMBER_PATTERN = re.compile(r"^INV-\d{4}-.{6}$")


def yearly_prefix(year: int) -> str:
    return f"{INVOICE_NUMBER_PREFIX}{year}-"


def sequence_of(invoice_number: str) -> Optional[int]:
    """Sequence of a generated-shape number, None when the suffix is not all digits"""
    if not GENERATED_NUMBER_PATTERN.match(invoice_number):
        return None
    suffix = invoice_number[-SEQUENCE_DIGITS:]
    return int(suffix) if suffix.isdigit() else None


def collides_with_generated(invoice_number: str) -> bool:
    """
    True for numbers shaped like INV-YYYY-NNNNNN whose suffix is not numeric

    Such numbers would sort among the generated sequence without being part
    of it, so they are not accepted from callers.
    """
    return bool(GENERATED_NUMBER_PATTERN.match(invoice_number)) and sequence_of(invoice_number) is None


class InvoiceStatus(str, Enum):
    """Invoice status types (any transition is allowed)"""
    PENDING = "Pending"
    COMPLETE = "Complete"
    NOT_PAID = "Not Paid"


class Invoice(BaseModel, table=True):
    """
    Invoice - Billing document for a client

    Domain Rules:
    - invoice_number must be unique
    - subtotal is the sum of all invoice_items.amount
    - total_amount = (subtotal - discount) * (1 + tax_rate / 100) + shipping
    - subtotal and total_amount are derived, never accepted from clients
    - status may move freely between Pending, Complete and Not Paid
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index('ix_invoices_user_id', 'user_id'),
        Index('ix_invoices_user_status', 'user_id', 'status'),
        Index('ix_invoices_invoice_number', 'invoice_number', unique=True),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Opaque invoice identifier"
    )

    user_id: str = Field(
        description="Owning user"
    )

    client_id: str = Field(
        sa_column=Column(String(36), ForeignKey("clients.id"), nullable=False),
        description="Billed client"
    )

    project_id: Optional[str] = Field(
        default=None,
        sa_column=Column(String(36), nullable=True),
        description="Optional related project (referential only)"
    )

    invoice_number: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Unique invoice number (e.g., INV-2024-000001)"
    )

    invoice_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Issue date"
    )

    due_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Payment due date"
    )

    notes: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    subtotal: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Sum of line item amounts"
    )

    discount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Absolute discount"
    )

    tax_rate: Decimal = Field(
        sa_column=Column(Numeric(9, 4), nullable=False, default=0),
        description="Tax rate in percent"
    )

    shipping: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False, default=0),
        description="Absolute shipping charge"
    )

    total_amount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Derived invoice total (precision: 18,6)"
    )

    status: InvoiceStatus = Field(
        default=InvoiceStatus.PENDING,
        description="Invoice status (Pending, Complete, Not Paid)"
    )

    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Invoice creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        description="Last update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "8d3e2f4a-1b6c-4e7d-9a0b-2c3d4e5f6a7b",
                "user_id": "user_123",
                "client_id": "a1b2c3d4-0000-4000-8000-000000000001",
                "invoice_number": "INV-2024-000001",
                "invoice_date": "2024-02-01",
                "due_date": "2024-02-15",
                "subtotal": "100.000000",
                "discount": "10.000000",
                "tax_rate": "10.0000",
                "shipping": "5.000000",
                "total_amount": "104.000000",
                "status": "Pending",
                "created_at": "2024-02-01T00:00:00Z",
                "updated_at": "2024-02-01T00:00:00Z"
            }
        }
