"""CreateInvoice Use Case

Creates an invoice from submitted line items and adjustments. Amounts,
subtotal and total are derived by the invoice totals engine.
"""

import logging
from datetime import date
from typing import List
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.project_repository import ProjectRepository
from src.app.use_cases.authorization import authorize, validation_error
from src.domain.invoice import Invoice, collides_with_generated
from src.domain.invoice_item import InvoiceItem
from src.domain.invoice_totals import InvoiceTotals, InvoiceTotalsError, recompute_totals
from .dtos import CreateInvoiceCommandDTO, InvoiceResponseDTO, to_invoice_response

logger = logging.getLogger(__name__)


def build_items(totals: InvoiceTotals) -> List[InvoiceItem]:
    """InvoiceItem rows for priced items, positions in submitted order"""
    return [
        InvoiceItem(
            position=position,
            description=item.description,
            quantity=item.quantity,
            rate=item.rate,
            amount=item.amount,
        )
        for position, item in enumerate(totals.items)
    ]


class CreateInvoice:
    """
    Use Case: Create invoice

    Business Rules:
    1. Inputs must be non-negative and every item needs a description
    2. Client (and project, if given) must belong to the user
    3. invoice_number must be unique; generated (INV-YYYY-NNNNNN) when omitted;
       a caller-chosen number in that shape must end in six digits
    4. Totals are always derived, never taken from the caller

    Flow:
    1. Derive totals
    2. Authorize client and project
    3. Resolve invoice number
    4. Create invoice and items
    5. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        client_repo: ClientRepository,
        project_repo: ProjectRepository,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.client_repo = client_repo
        self.project_repo = project_repo

    async def execute(self, user_id: str, command: CreateInvoiceCommandDTO) -> Result[InvoiceResponseDTO]:
        """
        Execute invoice creation

        Args:
            user_id: Calling user
            command: CreateInvoiceCommandDTO with items and adjustments

        Returns:
            Result[InvoiceResponseDTO]: Created invoice with derived totals
        """
        # Step 1: Derive totals
        try:
            totals = recompute_totals(
                command.items,
                discount=command.discount,
                tax_rate=command.tax_rate,
                shipping=command.shipping,
            )
        except InvoiceTotalsError as e:
            return Return.err(validation_error("Invalid invoice input", reason=str(e)))

        try:
            # Step 2: Authorize referenced records
            client = await self.client_repo.get_by_id(command.client_id)
            authorized = authorize(client, user_id, "client")
            if authorized.is_err():
                return authorized

            if command.project_id:
                project = await self.project_repo.get_by_id(command.project_id)
                authorized = authorize(project, user_id, "project")
                if authorized.is_err():
                    return authorized

            # Step 3: Resolve invoice number
            if command.invoice_number:
                if collides_with_generated(command.invoice_number):
                    return Return.err(
                        validation_error(
                            "Numbers of the form INV-YYYY-NNNNNN must end in six digits",
                            reason=f"invoice_number={command.invoice_number}",
                        )
                    )
                existing = await self.invoice_repo.get_by_invoice_number(command.invoice_number)
                if existing:
                    return Return.err(
                        Error(
                            code="INVOICE_NUMBER_EXISTS",
                            message=f"Invoice number {command.invoice_number} is already in use",
                            reason="Duplicate invoice number",
                        )
                    )
                invoice_number = command.invoice_number
            else:
                invoice_number = await self.invoice_repo.generate_invoice_number()

            # Step 4: Create invoice and items
            invoice = Invoice(
                user_id=user_id,
                client_id=command.client_id,
                project_id=command.project_id,
                invoice_number=invoice_number,
                invoice_date=command.invoice_date or date.today(),
                due_date=command.due_date,
                notes=command.notes,
                subtotal=totals.subtotal,
                discount=totals.discount,
                tax_rate=totals.tax_rate,
                shipping=totals.shipping,
                total_amount=totals.total_amount,
                status=command.status,
            )
            created_invoice = await self.invoice_repo.create(invoice)
            items = await self.item_repo.replace_for_invoice(created_invoice.id, build_items(totals))

            # Step 5: Commit transaction
            await self.uow.commit()

            return Return.ok(to_invoice_response(created_invoice, items))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create invoice for user {user_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_INVOICE_FAILED",
                    message="Failed to create invoice",
                    reason=str(e),
                )
            )
