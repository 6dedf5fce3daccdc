"""Invoice Repository Interface

Invoices are read and written whole; their line items live behind
InvoiceItemRepository. Stored totals are whatever the totals engine
derived at the last write.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, List, Optional, Tuple
from src.domain.invoice import Invoice, InvoiceStatus


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Lookups by id or number are not scoped to a user; use cases check
    ownership on the returned record.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        pass

    @abstractmethod
    async def get_by_user_id(
        self,
        user_id: str,
        status: Optional[InvoiceStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Invoice]:
        """
        A page of the user's invoices, most recently created first

        Args:
            user_id: Owning user
            status: Only invoices in this status
            limit: Page size
            offset: Invoices to skip
        """
        pass

    @abstractmethod
    async def get_all(self, limit: int = 500, offset: int = 0) -> List[Invoice]:
        """Page through the invoices of every user in a stable (id) order"""
        pass

    @abstractmethod
    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """Persist changed fields and bump updated_at"""
        pass

    @abstractmethod
    async def delete(self, invoice: Invoice) -> None:
        pass

    @abstractmethod
    async def count_by_client_id(self, client_id: str) -> int:
        pass

    @abstractmethod
    async def status_summary(self, user_id: str) -> Dict[InvoiceStatus, Tuple[int, Decimal]]:
        """
        Count and sum total_amount of a user's invoices per status

        Returns:
            Mapping status -> (invoice count, sum of total_amount);
            statuses without invoices are absent
        """
        pass

    @abstractmethod
    async def generate_invoice_number(self) -> str:
        """Next free number of the form INV-YYYY-NNNNNN for the current year"""
        pass
