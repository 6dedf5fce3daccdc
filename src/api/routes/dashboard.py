"""Dashboard API Routes"""

from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyInvoiceItemRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyProjectRepository,
)
from src.api.error import raise_for_error
from src.app.use_cases.dashboard import DashboardStatsResponseDTO, GetDashboardStats
from src.depends import get_current_user_id, get_session

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStatsResponseDTO)
async def get_dashboard_stats(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Summary of the caller's business.

    Counts clients, projects In Progress and Pending invoices; sums unpaid
    and earned invoice totals; lists the most recent projects and invoices
    and the currently running timer.
    """
    use_case = GetDashboardStats(
        SqlAlchemyClientRepository(session),
        SqlAlchemyProjectRepository(session),
        SqlAlchemyInvoiceRepository(session),
        SqlAlchemyInvoiceItemRepository(session),
        recent_limit=ApplicationConfig.RECENT_ITEMS_LIMIT,
    )
    result = await use_case.execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
