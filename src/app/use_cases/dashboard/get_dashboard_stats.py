"""GetDashboardStats Use Case

Read-only rollup over clients, projects, invoices and the running timer.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.project_repository import ProjectRepository
from src.app.use_cases.billing.dtos import to_invoice_response
from src.app.use_cases.projects.dtos import to_project_response
from src.domain.invoice import InvoiceStatus
from src.domain.invoice_totals import MONEY_SCALE
from src.domain.project import ProjectStatus
from src.domain.time_tracking import to_utc_naive
from .dtos import DashboardStatsResponseDTO

ZERO = Decimal("0")


class GetDashboardStats:
    """
    Use Case: Dashboard statistics

    Business Rules:
    1. Everything is scoped to the requesting user
    2. unpaid_amount sums every status except Complete; total_earning sums Complete
    3. recent_projects: latest updated; recent_invoices: latest created
    4. active_timer carries the live elapsed time at ``now``
    5. Project and invoice entries carry their client name
    6. Amounts are reported at money scale, zero included
    7. Never mutates state
    """

    def __init__(
        self,
        client_repo: ClientRepository,
        project_repo: ProjectRepository,
        invoice_repo: InvoiceRepository,
        item_repo: InvoiceItemRepository,
        recent_limit: int = 5,
    ):
        self.client_repo = client_repo
        self.project_repo = project_repo
        self.invoice_repo = invoice_repo
        self.item_repo = item_repo
        self.recent_limit = recent_limit

    async def execute(self, user_id: str, now: Optional[datetime] = None) -> Result[DashboardStatsResponseDTO]:
        now = to_utc_naive(now or datetime.utcnow())

        try:
            total_clients = await self.client_repo.count_by_user_id(user_id)
            active_projects = await self.project_repo.count_by_user_id(
                user_id, status=ProjectStatus.IN_PROGRESS
            )

            summary = await self.invoice_repo.status_summary(user_id)
            pending_invoices = summary.get(InvoiceStatus.PENDING, (0, ZERO))[0]
            total_earning = summary.get(InvoiceStatus.COMPLETE, (0, ZERO))[1]
            unpaid_amount = sum(
                (total for status, (_, total) in summary.items() if status != InvoiceStatus.COMPLETE),
                ZERO,
            )

            client_names = {client.id: client.name for client in await self.client_repo.get_by_user_id(user_id)}

            def with_client(dto):
                return dto.model_copy(update={"client_name": client_names.get(dto.client_id)})

            recent_projects = await self.project_repo.get_by_user_id(user_id, limit=self.recent_limit)

            recent_invoices = []
            for invoice in await self.invoice_repo.get_by_user_id(user_id, limit=self.recent_limit):
                items = await self.item_repo.get_by_invoice_id(invoice.id)
                recent_invoices.append(with_client(to_invoice_response(invoice, items)))

            running = await self.project_repo.get_running_by_user_id(user_id)
            active_timer = with_client(to_project_response(running[0], now)) if running else None

            return Return.ok(
                DashboardStatsResponseDTO(
                    total_clients=total_clients,
                    active_projects=active_projects,
                    pending_invoices=pending_invoices,
                    unpaid_amount=unpaid_amount.quantize(MONEY_SCALE),
                    total_earning=total_earning.quantize(MONEY_SCALE),
                    recent_projects=[with_client(to_project_response(p, now)) for p in recent_projects],
                    recent_invoices=recent_invoices,
                    active_timer=active_timer,
                    generated_at=now,
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="DASHBOARD_STATS_FAILED",
                    message="Failed to load dashboard statistics",
                    reason=str(e),
                )
            )
