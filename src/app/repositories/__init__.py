from .client_repository import ClientRepository
from .project_repository import ProjectRepository
from .trial_repository import TrialRepository
from .invoice_repository import InvoiceRepository
from .invoice_item_repository import InvoiceItemRepository
from .time_log_repository import TimeLogRepository

__all__ = [
    "ClientRepository",
    "ProjectRepository",
    "TrialRepository",
    "InvoiceRepository",
    "InvoiceItemRepository",
    "TimeLogRepository",
]
