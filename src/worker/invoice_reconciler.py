"""Invoice Totals Reconciliation Background Worker

Periodically re-derives invoice subtotals and totals from stored items
and adjustments, and reports (optionally repairs) invoices that drifted.
"""

import argparse
import asyncio
import logging
from datetime import datetime
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories import SqlAlchemyInvoiceItemRepository, SqlAlchemyInvoiceRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.billing import InvoiceReconciliationResultDTO, ReconcileInvoiceTotals

logger = logging.getLogger(__name__)


class InvoiceReconcilerWorker:
    """
    Background worker for invoice totals reconciliation

    Usage:
        worker = InvoiceReconcilerWorker()
        result = await worker.run_once()

        await worker.run_forever(interval_seconds=86400)
    """

    def __init__(
        self,
        db_uri: Optional[str] = None,
        repair: Optional[bool] = None,
        session_factory=None,
    ):
        """
        Initialize the worker

        Args:
            db_uri: Database URI (defaults to ApplicationConfig.DB_URI)
            repair: Rewrite drifted totals (defaults to INVOICE_RECONCILIATION_REPAIR)
            session_factory: Existing session factory to use instead of a new engine
        """
        self.repair = ApplicationConfig.INVOICE_RECONCILIATION_REPAIR if repair is None else repair

        if session_factory is not None:
            self.engine = None
            self.async_session_factory = session_factory
        else:
            self.engine = create_async_engine(db_uri or ApplicationConfig.DB_URI, echo=False, future=True)
            self.async_session_factory = sessionmaker(
                self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
            )

        logger.info(f"InvoiceReconcilerWorker initialized (repair={self.repair})")

    async def run_once(self) -> InvoiceReconciliationResultDTO:
        if not ApplicationConfig.INVOICE_RECONCILIATION_ENABLED:
            logger.info("Invoice reconciliation is disabled, skipping")
            return InvoiceReconciliationResultDTO(
                total_invoices_checked=0,
                discrepancies_found=0,
                discrepancies=[],
                repaired=False,
                reconciliation_time=datetime.utcnow(),
                execution_time_ms=0,
            )

        async with self.async_session_factory() as session:
            use_case = ReconcileInvoiceTotals(
                uow=SqlAlchemyUnitOfWork(session),
                invoice_repo=SqlAlchemyInvoiceRepository(session),
                item_repo=SqlAlchemyInvoiceItemRepository(session),
            )

            result = await use_case.execute(repair=self.repair)

            if result.is_err():
                logger.error(f"Reconciliation failed: {result.error.message}")
                raise RuntimeError(f"Reconciliation failed: {result.error.message}")

            response = result.value

            if response.discrepancies_found > 0:
                logger.error(f"ALERT: {response.discrepancies_found} invoices with drifted totals")
                for d in response.discrepancies:
                    logger.error(
                        f"  - Invoice {d.invoice_number} (user={d.user_id}): "
                        f"stored={d.stored_total}, calculated={d.calculated_total}, "
                        f"repaired={d.repaired}"
                    )

            return response

    async def run_forever(self, interval_seconds: int = 86400):
        logger.info(f"Starting continuous invoice reconciliation with {interval_seconds}s interval")

        while True:
            try:
                result = await self.run_once()
                logger.info(
                    f"Reconciliation cycle complete. "
                    f"Checked {result.total_invoices_checked} invoices, "
                    f"found {result.discrepancies_found} discrepancies "
                    f"in {result.execution_time_ms}ms"
                )
            except Exception as e:
                logger.error(f"Reconciliation cycle failed: {e}")

            await asyncio.sleep(interval_seconds)

    async def shutdown(self):
        if self.engine is not None:
            await self.engine.dispose()
        logger.info("InvoiceReconcilerWorker shutdown complete")


async def main():
    """
    Entry point for running the worker as a standalone script

    Usage:
        python -m src.worker.invoice_reconciler --once
        python -m src.worker.invoice_reconciler --interval 3600 --repair
    """
    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Invoice Totals Reconciliation Worker")
    parser.add_argument("--once", action="store_true", help="Run once and exit")
    parser.add_argument(
        "--interval",
        type=int,
        default=ApplicationConfig.INVOICE_RECONCILIATION_INTERVAL_SECONDS,
        help="Interval between runs in seconds (default: 86400 = 24 hours)",
    )
    parser.add_argument(
        "--repair", action="store_true", help="Overwrite drifted totals with derived ones"
    )
    args = parser.parse_args()

    worker = InvoiceReconcilerWorker(repair=args.repair or None)

    try:
        if args.once:
            result = await worker.run_once()
            print("Reconciliation complete:")
            print(f"  Invoices checked: {result.total_invoices_checked}")
            print(f"  Discrepancies found: {result.discrepancies_found}")
            print(f"  Unpriceable invoices: {len(result.invalid_invoices)}")
            print(f"  Repaired: {result.repaired}")
            print(f"  Execution time: {result.execution_time_ms}ms")
        else:
            await worker.run_forever(interval_seconds=args.interval)
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
    finally:
        await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
