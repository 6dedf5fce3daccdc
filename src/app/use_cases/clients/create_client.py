"""CreateClient Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.domain.client import Client
from .dtos import ClientResponseDTO, CreateClientCommandDTO, to_client_response

logger = logging.getLogger(__name__)


class CreateClient:
    def __init__(self, uow: UnitOfWork, client_repo: ClientRepository):
        self.uow = uow
        self.client_repo = client_repo

    async def execute(self, user_id: str, command: CreateClientCommandDTO) -> Result[ClientResponseDTO]:
        try:
            client = Client(user_id=user_id, **command.model_dump())
            created_client = await self.client_repo.create(client)
            await self.uow.commit()
            return Return.ok(to_client_response(created_client))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create client for user {user_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_CLIENT_FAILED",
                    message="Failed to create client",
                    reason=str(e),
                )
            )
