"""Invoice read use cases"""

from typing import Optional
from libs.result import Result, Return
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.use_cases.authorization import authorize
from src.domain.invoice import InvoiceStatus
from .dtos import InvoiceResponseDTO, ListInvoicesResponseDTO, to_invoice_response


class GetInvoice:
    def __init__(self, invoice_repo: InvoiceRepository, item_repo: InvoiceItemRepository):
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(self, user_id: str, invoice_id: str) -> Result[InvoiceResponseDTO]:
        invoice = await self.invoice_repo.get_by_id(invoice_id)
        authorized = authorize(invoice, user_id, "invoice")
        if authorized.is_err():
            return authorized

        items = await self.item_repo.get_by_invoice_id(invoice.id)
        return Return.ok(to_invoice_response(invoice, items))


class ListInvoices:
    """Lists the user's invoices, newest first, with optional status filter"""

    def __init__(self, invoice_repo: InvoiceRepository, item_repo: InvoiceItemRepository):
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(
        self,
        user_id: str,
        status: Optional[InvoiceStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Result[ListInvoicesResponseDTO]:
        invoices = await self.invoice_repo.get_by_user_id(
            user_id, status=status, limit=limit, offset=offset
        )

        responses = []
        for invoice in invoices:
            items = await self.item_repo.get_by_invoice_id(invoice.id)
            responses.append(to_invoice_response(invoice, items))

        return Return.ok(ListInvoicesResponseDTO(invoices=responses, limit=limit, offset=offset))
