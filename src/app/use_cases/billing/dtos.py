"""Data Transfer Objects for Billing Use Cases

Pydantic models for trial and invoice command inputs and response outputs.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.invoice import Invoice, InvoiceStatus
from src.domain.invoice_item import InvoiceItem
from src.domain.trial import Trial


class RecordTrialCommandDTO(BaseModel):
    """
    Command DTO for recording a trial session

    cost and is_extra are never accepted; the pricing policy derives them.
    """

    project_id: str = Field(
        ...,
        min_length=1,
        description="Project the trial belongs to"
    )

    notes: Optional[str] = Field(
        default=None,
        description="Free-form notes about the session"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "project_id": "3f6c1a52-8a0e-4f0b-9d43-5a2f1d7c9e10",
                "notes": "Logo concept review"
            }
        }


class TrialResponseDTO(BaseModel):
    id: str
    user_id: str
    project_id: str
    date: datetime
    notes: Optional[str] = None
    cost: Decimal = Field(..., description="Charged amount (0 within the free quota)")
    is_extra: bool = Field(..., description="True when past the free quota")
    created_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "id": "0e1f2a3b-4c5d-4e6f-8a9b-0c1d2e3f4a5b",
                "user_id": "user_123",
                "project_id": "3f6c1a52-8a0e-4f0b-9d43-5a2f1d7c9e10",
                "date": "2024-01-01T00:00:00Z",
                "notes": "Fourth review",
                "cost": "10.00",
                "is_extra": True,
                "created_at": "2024-01-01T00:00:00Z"
            }
        }


class InvoiceItemInputDTO(BaseModel):
    description: str = Field(..., min_length=1, description="Line item description")
    quantity: Decimal = Field(..., ge=0, description="Quantity (must be >= 0)")
    rate: Decimal = Field(..., ge=0, description="Price per unit (must be >= 0)")


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating an invoice

    subtotal, item amounts and total_amount are derived by the totals
    engine and therefore not part of the command.
    """

    client_id: str = Field(..., min_length=1, description="Billed client")

    project_id: Optional[str] = Field(default=None, description="Optional related project")

    invoice_number: Optional[str] = Field(
        default=None,
        min_length=1,
        max_length=50,
        description="Unique invoice number (generated as INV-YYYY-NNNNNN when omitted)"
    )

    invoice_date: Optional[date] = Field(default=None, description="Issue date (defaults to today)")

    due_date: date = Field(..., description="Payment due date")

    notes: Optional[str] = Field(default=None)

    items: List[InvoiceItemInputDTO] = Field(default_factory=list)

    discount: Decimal = Field(default=Decimal("0"), ge=0, description="Absolute discount")

    tax_rate: Decimal = Field(default=Decimal("0"), ge=0, description="Tax rate in percent")

    shipping: Decimal = Field(default=Decimal("0"), ge=0, description="Absolute shipping charge")

    status: InvoiceStatus = Field(default=InvoiceStatus.PENDING)

    class Config:
        json_schema_extra = {
            "example": {
                "client_id": "a1b2c3d4-0000-4000-8000-000000000001",
                "due_date": "2024-02-15",
                "items": [{"description": "Design work", "quantity": "2", "rate": "50.00"}],
                "discount": "10.00",
                "tax_rate": "10",
                "shipping": "5.00"
            }
        }


class UpdateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for updating an invoice

    status, due_date and notes are applied as given. Any of items,
    discount, tax_rate or shipping triggers a re-derivation of the totals.
    """

    status: Optional[InvoiceStatus] = Field(default=None)
    due_date: Optional[date] = Field(default=None)
    notes: Optional[str] = Field(default=None)
    items: Optional[List[InvoiceItemInputDTO]] = Field(default=None)
    discount: Optional[Decimal] = Field(default=None, ge=0)
    tax_rate: Optional[Decimal] = Field(default=None, ge=0)
    shipping: Optional[Decimal] = Field(default=None, ge=0)


class InvoiceItemDTO(BaseModel):
    description: str
    quantity: Decimal
    rate: Decimal
    amount: Decimal


class InvoiceResponseDTO(BaseModel):
    """Response DTO for invoice operations"""

    id: str
    user_id: str
    client_id: str
    client_name: Optional[str] = Field(default=None, description="Client name, filled in by the dashboard")
    project_id: Optional[str] = None
    invoice_number: str
    invoice_date: date
    due_date: date
    notes: Optional[str] = None
    items: List[InvoiceItemDTO]
    subtotal: Decimal
    discount: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    shipping: Decimal
    total_amount: Decimal
    status: str
    created_at: datetime
    updated_at: datetime


class ListInvoicesResponseDTO(BaseModel):
    invoices: List[InvoiceResponseDTO]
    limit: int
    offset: int


class DeleteInvoiceResponseDTO(BaseModel):
    invoice_id: str
    message: str = "Invoice removed"


class InvoiceDiscrepancyDTO(BaseModel):
    """Invoice whose stored totals differ from the derived totals"""

    invoice_id: str
    invoice_number: str
    user_id: str
    stored_subtotal: Decimal
    calculated_subtotal: Decimal
    stored_total: Decimal
    calculated_total: Decimal
    repaired: bool = False


class InvoiceReconciliationResultDTO(BaseModel):
    total_invoices_checked: int
    discrepancies_found: int
    discrepancies: List[InvoiceDiscrepancyDTO]
    invalid_invoices: List[str] = Field(
        default_factory=list,
        description="Invoices whose stored inputs cannot be priced"
    )
    repaired: bool
    reconciliation_time: datetime
    execution_time_ms: int


def to_trial_response(trial: Trial) -> TrialResponseDTO:
    return TrialResponseDTO(
        id=trial.id,
        user_id=trial.user_id,
        project_id=trial.project_id,
        date=trial.date,
        notes=trial.notes,
        cost=trial.cost,
        is_extra=trial.is_extra,
        created_at=trial.created_at,
    )


def to_invoice_response(invoice: Invoice, items: List[InvoiceItem]) -> InvoiceResponseDTO:
    """Convert an Invoice and its items to the response DTO"""
    tax_amount = invoice.total_amount - (invoice.subtotal - invoice.discount) - invoice.shipping
    return InvoiceResponseDTO(
        id=invoice.id,
        user_id=invoice.user_id,
        client_id=invoice.client_id,
        project_id=invoice.project_id,
        invoice_number=invoice.invoice_number,
        invoice_date=invoice.invoice_date,
        due_date=invoice.due_date,
        notes=invoice.notes,
        items=[
            InvoiceItemDTO(
                description=item.description,
                quantity=item.quantity,
                rate=item.rate,
                amount=item.amount,
            )
            for item in items
        ],
        subtotal=invoice.subtotal,
        discount=invoice.discount,
        tax_rate=invoice.tax_rate,
        tax_amount=tax_amount,
        shipping=invoice.shipping,
        total_amount=invoice.total_amount,
        status=invoice.status.value if hasattr(invoice.status, "value") else invoice.status,
        created_at=invoice.created_at,
        updated_at=invoice.updated_at,
    )
