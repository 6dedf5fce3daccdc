"""UpdateInvoice Use Case

Applies status/due date/notes edits directly and re-derives totals
whenever items or adjustments change.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.use_cases.authorization import authorize, validation_error
from src.domain.invoice_totals import InvoiceTotalsError, recompute_totals
from .create_invoice import build_items
from .dtos import InvoiceResponseDTO, UpdateInvoiceCommandDTO, to_invoice_response

logger = logging.getLogger(__name__)

TOTALS_FIELDS = ("items", "discount", "tax_rate", "shipping")


class UpdateInvoice:
    """
    Use Case: Update invoice

    Business Rules:
    1. Invoice must belong to the user (else INVOICE_NOT_FOUND)
    2. Status may change to any other status
    3. Items are replaced wholesale
    4. Totals are re-derived from the merged inputs, never accepted raw
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo

    async def execute(
        self, user_id: str, invoice_id: str, command: UpdateInvoiceCommandDTO
    ) -> Result[InvoiceResponseDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            authorized = authorize(invoice, user_id, "invoice")
            if authorized.is_err():
                return authorized

            changes = {
                field: value
                for field, value in command.model_dump(exclude_unset=True).items()
                if value is not None or field == "notes"
            }

            if "status" in changes:
                invoice.status = command.status
            if "due_date" in changes:
                invoice.due_date = command.due_date
            if "notes" in changes:
                invoice.notes = command.notes

            items = await self.item_repo.get_by_invoice_id(invoice.id)

            if any(field in changes for field in TOTALS_FIELDS):
                try:
                    totals = recompute_totals(
                        command.items if "items" in changes else items,
                        discount=command.discount if "discount" in changes else invoice.discount,
                        tax_rate=command.tax_rate if "tax_rate" in changes else invoice.tax_rate,
                        shipping=command.shipping if "shipping" in changes else invoice.shipping,
                    )
                except InvoiceTotalsError as e:
                    await self.uow.rollback()
                    return Return.err(validation_error("Invalid invoice input", reason=str(e)))

                invoice.subtotal = totals.subtotal
                invoice.discount = totals.discount
                invoice.tax_rate = totals.tax_rate
                invoice.shipping = totals.shipping
                invoice.total_amount = totals.total_amount

                if "items" in changes:
                    items = await self.item_repo.replace_for_invoice(invoice.id, build_items(totals))

            updated_invoice = await self.invoice_repo.update(invoice)

            await self.uow.commit()

            return Return.ok(to_invoice_response(updated_invoice, items))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update invoice {invoice_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_INVOICE_FAILED",
                    message="Failed to update invoice",
                    reason=str(e),
                )
            )
