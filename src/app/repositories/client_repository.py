"""Client Repository Interface

Defines the contract for client persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.client import Client


class ClientRepository(ABC):
    """Repository interface for Client persistence"""

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """
        Create a new client

        Args:
            client: Client entity to persist

        Returns:
            Created Client
        """
        pass

    @abstractmethod
    async def get_by_id(self, client_id: str) -> Optional[Client]:
        """
        Retrieve client by ID (regardless of owner)

        Args:
            client_id: Client ID

        Returns:
            Client if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> List[Client]:
        """Retrieve all clients of a user, newest first"""
        pass

    @abstractmethod
    async def count_by_user_id(self, user_id: str) -> int:
        """Count clients of a user"""
        pass

    @abstractmethod
    async def update(self, client: Client) -> Client:
        """Persist changed fields and bump updated_at"""
        pass

    @abstractmethod
    async def delete(self, client: Client) -> None:
        pass
