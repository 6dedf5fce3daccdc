"""UpdateClient Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.app.use_cases.authorization import authorize
from .dtos import ClientResponseDTO, UpdateClientCommandDTO, to_client_response

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "email", "status")


class UpdateClient:
    """
    Use Case: Update client details

    Business Rules:
    1. Client must belong to the user (else CLIENT_NOT_FOUND)
    2. Only fields sent are applied; name, email and status cannot be cleared
    """

    def __init__(self, uow: UnitOfWork, client_repo: ClientRepository):
        self.uow = uow
        self.client_repo = client_repo

    async def execute(
        self, user_id: str, client_id: str, command: UpdateClientCommandDTO
    ) -> Result[ClientResponseDTO]:
        try:
            client = await self.client_repo.get_by_id(client_id)
            authorized = authorize(client, user_id, "client")
            if authorized.is_err():
                return authorized

            for field, value in command.model_dump(exclude_unset=True).items():
                if value is None and field in REQUIRED_FIELDS:
                    continue
                setattr(client, field, value)

            updated_client = await self.client_repo.update(client)
            await self.uow.commit()

            return Return.ok(to_client_response(updated_client))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update client {client_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_CLIENT_FAILED",
                    message="Failed to update client",
                    reason=str(e),
                )
            )
