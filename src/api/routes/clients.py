"""Client API Routes"""

from typing import List
from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyProjectRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import raise_for_error
from src.app.use_cases.clients import (
    ClientResponseDTO,
    CreateClient,
    CreateClientCommandDTO,
    DeleteClient,
    DeleteClientResponseDTO,
    GetClient,
    ListClients,
    UpdateClient,
    UpdateClientCommandDTO,
)
from src.depends import get_current_user_id, get_session

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.post("", response_model=ClientResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_client(
    command: CreateClientCommandDTO,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = CreateClient(SqlAlchemyUnitOfWork(session), SqlAlchemyClientRepository(session))
    result = await use_case.execute(user_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", response_model=List[ClientResponseDTO])
async def list_clients(
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    result = await ListClients(SqlAlchemyClientRepository(session)).execute(user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{client_id}", response_model=ClientResponseDTO)
async def get_client(
    client_id: str,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    result = await GetClient(SqlAlchemyClientRepository(session)).execute(user_id, client_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{client_id}", response_model=ClientResponseDTO)
async def update_client(
    client_id: str,
    command: UpdateClientCommandDTO,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = UpdateClient(SqlAlchemyUnitOfWork(session), SqlAlchemyClientRepository(session))
    result = await use_case.execute(user_id, client_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete(
    "/{client_id}",
    response_model=DeleteClientResponseDTO,
    responses={409: {"description": "Client still has projects or invoices"}},
)
async def delete_client(
    client_id: str,
    user_id: str = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_session),
):
    """Delete a client that no project or invoice references"""
    use_case = DeleteClient(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyClientRepository(session),
        SqlAlchemyProjectRepository(session),
        SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(user_id, client_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
