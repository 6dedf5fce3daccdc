"""Invoice Item Domain Entity

Tracks individual line items within an invoice.
"""

from decimal import Decimal
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Integer, Numeric, String
from src.domain.base import BaseModel, generate_uuid


class InvoiceItem(BaseModel, table=True):
    """
    Invoice Item - Line item within an invoice

    Domain Rules:
    - Each item belongs to exactly one invoice
    - amount = quantity * rate
    - Items are replaced wholesale when an invoice is edited
    - position keeps the submitted order
    """

    __tablename__ = "invoice_items"
    __table_args__ = (
        Index('ix_invoice_items_invoice_id', 'invoice_id'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Opaque item identifier"
    )

    invoice_id: str = Field(
        sa_column=Column(String(36), ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False),
        description="Foreign key to Invoice"
    )

    position: int = Field(
        sa_column=Column(Integer, nullable=False),
        description="Zero-based order of the item on the invoice"
    )

    description: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Line item description"
    )

    quantity: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Quantity (hours, units, ...)"
    )

    rate: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="Price per unit"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 6), nullable=False),
        description="quantity * rate"
    )
