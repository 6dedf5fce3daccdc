"""Client use cases"""
from .create_client import CreateClient
from .delete_client import DeleteClient
from .get_client import GetClient
from .list_clients import ListClients
from .update_client import UpdateClient
from .dtos import (
    CreateClientCommandDTO,
    UpdateClientCommandDTO,
    ClientResponseDTO,
    DeleteClientResponseDTO,
)

__all__ = [
    "CreateClient",
    "DeleteClient",
    "GetClient",
    "ListClients",
    "UpdateClient",
    "CreateClientCommandDTO",
    "UpdateClientCommandDTO",
    "ClientResponseDTO",
    "DeleteClientResponseDTO",
]
