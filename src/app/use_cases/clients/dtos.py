"""Data Transfer Objects for Client Use Cases"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from src.domain.client import Client, ClientStatus


class CreateClientCommandDTO(BaseModel):
    name: str = Field(..., min_length=1, description="Client contact name")
    email: str = Field(..., min_length=3, description="Client contact email")
    phone: Optional[str] = Field(default=None)
    company_name: Optional[str] = Field(default=None)
    address: Optional[str] = Field(default=None)
    status: ClientStatus = Field(default=ClientStatus.ACTIVE)

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Jane Doe",
                "email": "jane@example.com",
                "company_name": "Acme Ltd"
            }
        }


class UpdateClientCommandDTO(BaseModel):
    """Only fields present in the request are applied"""

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=3)
    phone: Optional[str] = Field(default=None)
    company_name: Optional[str] = Field(default=None)
    address: Optional[str] = Field(default=None)
    status: Optional[ClientStatus] = Field(default=None)


class ClientResponseDTO(BaseModel):
    id: str
    user_id: str
    name: str
    email: str
    phone: Optional[str] = None
    company_name: Optional[str] = None
    address: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime


class DeleteClientResponseDTO(BaseModel):
    client_id: str
    message: str = "Client removed"


def to_client_response(client: Client) -> ClientResponseDTO:
    return ClientResponseDTO(
        id=client.id,
        user_id=client.user_id,
        name=client.name,
        email=client.email,
        phone=client.phone,
        company_name=client.company_name,
        address=client.address,
        status=client.status.value if hasattr(client.status, "value") else client.status,
        created_at=client.created_at,
        updated_at=client.updated_at,
    )
