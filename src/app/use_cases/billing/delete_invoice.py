"""DeleteInvoice Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.use_cases.authorization import authorize
from .dtos import DeleteInvoiceResponseDTO

logger = logging.getLogger(__name__)


class DeleteInvoice:
    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(self, user_id: str, invoice_id: str) -> Result[DeleteInvoiceResponseDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            authorized = authorize(invoice, user_id, "invoice")
            if authorized.is_err():
                return authorized

            await self.item_repo.delete_by_invoice_id(invoice.id)
            await self.invoice_repo.delete(invoice)

            await self.uow.commit()

            return Return.ok(DeleteInvoiceResponseDTO(invoice_id=invoice_id))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_INVOICE_FAILED",
                    message="Failed to delete invoice",
                    reason=str(e),
                )
            )
