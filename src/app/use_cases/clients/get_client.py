"""GetClient Use Case"""

from libs.result import Result, Return
from src.app.repositories.client_repository import ClientRepository
from src.app.use_cases.authorization import authorize
from .dtos import ClientResponseDTO, to_client_response


class GetClient:
    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, user_id: str, client_id: str) -> Result[ClientResponseDTO]:
        client = await self.client_repo.get_by_id(client_id)
        authorized = authorize(client, user_id, "client")
        if authorized.is_err():
            return authorized
        return Return.ok(to_client_response(client))
