"""ListClients Use Case"""

from typing import List
from libs.result import Result, Return
from src.app.repositories.client_repository import ClientRepository
from .dtos import ClientResponseDTO, to_client_response


class ListClients:
    def __init__(self, client_repo: ClientRepository):
        self.client_repo = client_repo

    async def execute(self, user_id: str) -> Result[List[ClientResponseDTO]]:
        clients = await self.client_repo.get_by_user_id(user_id)
        return Return.ok([to_client_response(client) for client in clients])
