"""Invoice Item Repository Interface

Defines the contract for invoice line item persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice_item import InvoiceItem


class InvoiceItemRepository(ABC):
    """Repository interface for InvoiceItem persistence"""

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: str) -> List[InvoiceItem]:
        """
        Retrieve all line items of an invoice in position order

        Args:
            invoice_id: Invoice ID

        Returns:
            List of InvoiceItem
        """
        pass

    @abstractmethod
    async def replace_for_invoice(self, invoice_id: str, items: List[InvoiceItem]) -> List[InvoiceItem]:
        """
        Replace all line items of an invoice

        Args:
            invoice_id: Invoice ID
            items: New items (position already assigned)

        Returns:
            The persisted items
        """
        pass

    @abstractmethod
    async def delete_by_invoice_id(self, invoice_id: str) -> None:
        """Delete all line items of an invoice"""
        pass
