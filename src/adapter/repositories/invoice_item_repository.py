"""SQLAlchemy Invoice Item Repository Implementation"""

from typing import List
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.domain.invoice_item import InvoiceItem


class SqlAlchemyInvoiceItemRepository(InvoiceItemRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_invoice_id(self, invoice_id: str) -> List[InvoiceItem]:
        statement = (
            select(InvoiceItem)
            .where(InvoiceItem.invoice_id == invoice_id)
            .order_by(InvoiceItem.position)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def replace_for_invoice(self, invoice_id: str, items: List[InvoiceItem]) -> List[InvoiceItem]:
        await self.delete_by_invoice_id(invoice_id)
        for item in items:
            item.invoice_id = invoice_id
            self.session.add(item)
        await self.session.flush()
        return items

    async def delete_by_invoice_id(self, invoice_id: str) -> None:
        statement = delete(InvoiceItem).where(InvoiceItem.invoice_id == invoice_id)
        await self.session.execute(statement)
        await self.session.flush()
