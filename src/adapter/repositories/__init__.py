from .client_repository import SqlAlchemyClientRepository
from .project_repository import SqlAlchemyProjectRepository
from .trial_repository import SqlAlchemyTrialRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_item_repository import SqlAlchemyInvoiceItemRepository
from .time_log_repository import SqlAlchemyTimeLogRepository

__all__ = [
    "SqlAlchemyClientRepository",
    "SqlAlchemyProjectRepository",
    "SqlAlchemyTrialRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceItemRepository",
    "SqlAlchemyTimeLogRepository",
]
