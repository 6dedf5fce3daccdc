"""SQLAlchemy Invoice Repository Implementation"""

from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Tuple
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.invoice import SEQUENCE_DIGITS, Invoice, InvoiceStatus, sequence_of, yearly_prefix


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: str) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.id == invoice_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_user_id(
        self,
        user_id: str,
        status: Optional[InvoiceStatus] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Invoice]:
        """
        Retrieve invoices by owner

        Args:
            user_id: Owning user
            status: Optional filter by status
            limit: Maximum number of invoices to return
            offset: Offset for pagination

        Returns:
            List of invoices, newest first
        """
        statement = select(Invoice).where(Invoice.user_id == user_id)

        if status:
            statement = statement.where(Invoice.status == status)

        statement = statement.order_by(Invoice.created_at.desc())
        statement = statement.limit(limit).offset(offset)

        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_all(self, limit: int = 500, offset: int = 0) -> List[Invoice]:
        statement = select(Invoice).order_by(Invoice.id).limit(limit).offset(offset)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_invoice_number(self, invoice_number: str) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.invoice_number == invoice_number)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def update(self, invoice: Invoice) -> Invoice:
        invoice.updated_at = datetime.utcnow()
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def delete(self, invoice: Invoice) -> None:
        await self.session.delete(invoice)
        await self.session.flush()

    async def count_by_client_id(self, client_id: str) -> int:
        statement = select(func.count()).select_from(Invoice).where(Invoice.client_id == client_id)
        result = await self.session.execute(statement)
        return result.scalar_one()

    async def status_summary(self, user_id: str) -> Dict[InvoiceStatus, Tuple[int, Decimal]]:
        """
        Count and sum invoice totals per status for a user

        Args:
            user_id: Owning user

        Returns:
            Mapping status -> (count, sum of total_amount)
        """
        statement = (
            select(Invoice.status, func.count(), func.sum(Invoice.total_amount))
            .where(Invoice.user_id == user_id)
            .group_by(Invoice.status)
        )
        result = await self.session.execute(statement)

        summary: Dict[InvoiceStatus, Tuple[int, Decimal]] = {}
        for status, count, total in result.all():
            if total is None:
                total = Decimal("0")
            elif not isinstance(total, Decimal):
                total = Decimal(str(total))
            summary[InvoiceStatus(status)] = (count, total)
        return summary

    async def generate_invoice_number(self) -> str:
        """
        Next INV-YYYY-NNNNNN number for the current year

        Only numbers with an all-digit six character suffix take part;
        anything else sharing the prefix is skipped.
        """
        prefix = yearly_prefix(datetime.utcnow().year)

        statement = (
            select(Invoice.invoice_number)
            .where(Invoice.invoice_number.like(f"{prefix}%"))
            .where(func.length(Invoice.invoice_number) == len(prefix) + SEQUENCE_DIGITS)
        )
        result = await self.session.execute(statement)
        sequences = [sequence_of(number) for number in result.scalars().all()]
        last_sequence = max((s for s in sequences if s is not None), default=0)

        return f"{prefix}{last_sequence + 1:0{SEQUENCE_DIGITS}d}"
