"""ReconcileInvoiceTotals Use Case

Checks stored invoice subtotals and totals against the totals derived
from stored items and adjustments, and optionally repairs drift.
"""

import logging
import time
from datetime import datetime
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice_totals import InvoiceTotalsError, recompute_totals
from .dtos import InvoiceDiscrepancyDTO, InvoiceReconciliationResultDTO

logger = logging.getLogger(__name__)


class ReconcileInvoiceTotals:
    """
    Use Case: Reconcile stored invoice totals

    Business Rules:
    1. Pages through every invoice of every user
    2. Recomputes subtotal and total from stored items and adjustments
    3. Records a discrepancy when either stored value differs
    4. With repair=True, overwrites stored values with derived ones and commits;
       otherwise read-only
    5. Invoices whose stored inputs cannot be priced are reported, never modified
    """

    def __init__(
        self,
        uow: UnitOfWork,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        batch_size: int = 500,
    ):
        self.uow = uow
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.batch_size = batch_size

    async def execute(self, repair: bool = False) -> Result[InvoiceReconciliationResultDTO]:
        """
        Execute invoice totals reconciliation

        Args:
            repair: Rewrite drifted totals when True

        Returns:
            Result[InvoiceReconciliationResultDTO]
        """
        start_time = time.time()
        reconciliation_time = datetime.utcnow()

        try:
            logger.info(f"Starting invoice totals reconciliation (repair={repair})")

            discrepancies: list[InvoiceDiscrepancyDTO] = []
            invalid_invoices: list[str] = []
            total_invoices = 0
            offset = 0

            while True:
                invoices = await self.invoice_repo.get_all(limit=self.batch_size, offset=offset)
                if not invoices:
                    break
                offset += len(invoices)
                total_invoices += len(invoices)

                for invoice in invoices:
                    items = await self.item_repo.get_by_invoice_id(invoice.id)
                    try:
                        totals = recompute_totals(
                            items,
                            discount=invoice.discount,
                            tax_rate=invoice.tax_rate,
                            shipping=invoice.shipping,
                        )
                    except InvoiceTotalsError as e:
                        invalid_invoices.append(invoice.id)
                        logger.warning(f"Invoice {invoice.id} cannot be priced: {e}")
                        continue

                    if invoice.subtotal == totals.subtotal and invoice.total_amount == totals.total_amount:
                        continue

                    discrepancy = InvoiceDiscrepancyDTO(
                        invoice_id=invoice.id,
                        invoice_number=invoice.invoice_number,
                        user_id=invoice.user_id,
                        stored_subtotal=invoice.subtotal,
                        calculated_subtotal=totals.subtotal,
                        stored_total=invoice.total_amount,
                        calculated_total=totals.total_amount,
                        repaired=repair,
                    )
                    discrepancies.append(discrepancy)

                    logger.warning(
                        f"Invoice {invoice.invoice_number} (id={invoice.id}) drifted: "
                        f"stored_total={invoice.total_amount}, calculated_total={totals.total_amount}"
                    )

                    if repair:
                        invoice.subtotal = totals.subtotal
                        invoice.total_amount = totals.total_amount
                        await self.invoice_repo.update(invoice)

                if len(invoices) < self.batch_size:
                    break

            if repair and discrepancies:
                await self.uow.commit()

            execution_time_ms = int((time.time() - start_time) * 1000)

            response = InvoiceReconciliationResultDTO(
                total_invoices_checked=total_invoices,
                discrepancies_found=len(discrepancies),
                discrepancies=discrepancies,
                invalid_invoices=invalid_invoices,
                repaired=repair and bool(discrepancies),
                reconciliation_time=reconciliation_time,
                execution_time_ms=execution_time_ms,
            )

            if discrepancies:
                logger.warning(
                    f"Reconciliation complete. Found {len(discrepancies)} drifted invoices "
                    f"out of {total_invoices} in {execution_time_ms}ms"
                )
            else:
                logger.info(
                    f"Reconciliation complete. All {total_invoices} invoices consistent "
                    f"in {execution_time_ms}ms"
                )

            return Return.ok(response)

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Invoice totals reconciliation failed: {e}")
            return Return.err(
                Error(
                    code="RECONCILIATION_FAILED",
                    message="Failed to reconcile invoice totals",
                    reason=str(e),
                )
            )
