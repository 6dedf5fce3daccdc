from .base import BaseModel, generate_uuid
from .client import Client, ClientStatus
from .project import Project, ProjectStatus
from .trial import Trial
from .invoice import Invoice, InvoiceStatus
from .invoice_item import InvoiceItem
from .time_log import TimeLog

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Client",
    "ClientStatus",
    "Project",
    "ProjectStatus",
    "Trial",
    "Invoice",
    "InvoiceStatus",
    "InvoiceItem",
    "TimeLog",
]
