"""DeleteClient Use Case

A client is removed only once nothing references it. Projects and
invoices keep their client, so the caller deletes or moves them first.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.project_repository import ProjectRepository
from src.app.use_cases.authorization import authorize
from .dtos import DeleteClientResponseDTO

logger = logging.getLogger(__name__)


class DeleteClient:
    """
    Use Case: Delete client

    Business Rules:
    1. Client must belong to the user (else CLIENT_NOT_FOUND)
    2. A client still referenced by projects or invoices is kept (CLIENT_IN_USE)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_repo: ClientRepository,
        project_repo: ProjectRepository,
        invoice_repo: InvoiceRepository,
    ):
        self.uow = uow
        self.client_repo = client_repo
        self.project_repo = project_repo
        self.invoice_repo = invoice_repo

    async def execute(self, user_id: str, client_id: str) -> Result[DeleteClientResponseDTO]:
        try:
            client = await self.client_repo.get_by_id(client_id)
            authorized = authorize(client, user_id, "client")
            if authorized.is_err():
                return authorized

            projects = await self.project_repo.count_by_client_id(client_id)
            invoices = await self.invoice_repo.count_by_client_id(client_id)
            if projects or invoices:
                return Return.err(
                    Error(
                        code="CLIENT_IN_USE",
                        message="Client still has projects or invoices",
                        reason=f"projects={projects}, invoices={invoices}",
                    )
                )

            await self.client_repo.delete(client)
            await self.uow.commit()

            logger.info(f"Deleted client {client_id}")
            return Return.ok(DeleteClientResponseDTO(client_id=client_id))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete client {client_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_CLIENT_FAILED",
                    message="Failed to delete client",
                    reason=str(e),
                )
            )
