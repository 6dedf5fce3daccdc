"""Invoice API Routes

FastAPI routes for invoices. Line amounts, subtotal, tax and total are
always derived server side from the items and adjustments.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyInvoiceItemRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyProjectRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import raise_for_error
from src.app.use_cases.billing import (
    CreateInvoice,
    CreateInvoiceCommandDTO,
    DeleteInvoice,
    DeleteInvoiceResponseDTO,
    GetInvoice,
    InvoiceResponseDTO,
    ListInvoices,
    ListInvoicesResponseDTO,
    UpdateInvoice,
    UpdateInvoiceCommandDTO,
)
from src.depends import get_current_user_id, get_session
from src.domain.invoice import InvoiceStatus

router = APIRouter(prefix="/invoices", tags=["Invoices"])

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Invoice not found (or owned by another user)",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "INVOICE_NOT_FOUND",
                        "message": "Invoice not found"
                    }
                }
            }
        }
    }
}


@router.post(
    "",
    response_model=InvoiceResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {
            "description": "Invoice number already in use",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INVOICE_NUMBER_EXISTS",
                            "message": "Invoice number INV-2024-000001 is already in use"
                        }
                    }
                }
            }
        }
    }
)
async def create_invoice(
    command: CreateInvoiceCommandDTO,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Create an invoice.

    **Example:** two items of 50.00 with a discount of 10, tax rate 10 and
    shipping 5 give subtotal 100, tax 9 and total 104.
    """
    use_case = CreateInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
        SqlAlchemyClientRepository(session),
        SqlAlchemyProjectRepository(session),
    )
    result = await use_case.execute(user_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", response_model=ListInvoicesResponseDTO)
async def list_invoices(
    status_filter: Optional[InvoiceStatus] = Query(default=None, alias="status"),
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = ListInvoices(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(user_id, status=status_filter, limit=limit, offset=offset)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{invoice_id}", response_model=InvoiceResponseDTO, responses=NOT_FOUND_RESPONSE)
async def get_invoice(
    invoice_id: str,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = GetInvoice(
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(user_id, invoice_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{invoice_id}", response_model=InvoiceResponseDTO, responses=NOT_FOUND_RESPONSE)
async def update_invoice(
    invoice_id: str,
    command: UpdateInvoiceCommandDTO,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Update an invoice.

    Sending any of `items`, `discount`, `tax_rate` or `shipping` recomputes
    the totals; omitted adjustments keep their stored values.
    """
    use_case = UpdateInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(user_id, invoice_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{invoice_id}", response_model=DeleteInvoiceResponseDTO, responses=NOT_FOUND_RESPONSE)
async def delete_invoice(
    invoice_id: str,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = DeleteInvoice(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
    )
    result = await use_case.execute(user_id, invoice_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
