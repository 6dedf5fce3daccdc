"""Data Transfer Objects for the Dashboard Use Case"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.app.use_cases.billing.dtos import InvoiceResponseDTO
from src.app.use_cases.projects.dtos import ProjectResponseDTO


class DashboardStatsResponseDTO(BaseModel):
    """
    Combined read of the user's business state

    One response so the dashboard renders a consistent snapshot.
    """

    total_clients: int
    active_projects: int = Field(..., description="Projects with status In Progress")
    pending_invoices: int = Field(..., description="Invoices with status Pending")
    unpaid_amount: Decimal = Field(..., description="Sum of totals of invoices not Complete")
    total_earning: Decimal = Field(..., description="Sum of totals of Complete invoices")
    recent_projects: List[ProjectResponseDTO]
    recent_invoices: List[InvoiceResponseDTO]
    active_timer: Optional[ProjectResponseDTO] = Field(
        default=None,
        description="The project whose timer is running, if any"
    )
    generated_at: datetime

    class Config:
        json_schema_extra = {
            "example": {
                "total_clients": 4,
                "active_projects": 2,
                "pending_invoices": 1,
                "unpaid_amount": "104.00",
                "total_earning": "2500.00",
                "recent_projects": [],
                "recent_invoices": [],
                "active_timer": None,
                "generated_at": "2024-01-01T00:00:00Z"
            }
        }
