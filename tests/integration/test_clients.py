"""Integration tests for client update and delete"""

import pytest

from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyProjectRepository,
    SqlAlchemyTrialRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.clients import DeleteClient, GetClient, UpdateClient, UpdateClientCommandDTO
from src.app.use_cases.projects import DeleteProject


@pytest.fixture
def delete_client(db_session):
    return DeleteClient(
        SqlAlchemyUnitOfWork(db_session),
        SqlAlchemyClientRepository(db_session),
        SqlAlchemyProjectRepository(db_session),
        SqlAlchemyInvoiceRepository(db_session),
    )


@pytest.mark.asyncio
class TestClientsIntegration:
    async def test_update_persists_sent_fields(self, db_session, seed):
        client, _ = await seed(project_names=())
        client_id = client.id
        update = UpdateClient(SqlAlchemyUnitOfWork(db_session), SqlAlchemyClientRepository(db_session))

        result = await update.execute("user_1", client_id, UpdateClientCommandDTO(company_name="Acme Group"))

        assert result.is_ok()
        stored = (await GetClient(SqlAlchemyClientRepository(db_session)).execute("user_1", client_id)).value
        assert stored.company_name == "Acme Group"
        assert stored.name == "Jane Doe"

    async def test_client_with_project_is_kept_until_project_is_gone(self, delete_client, db_session, seed):
        client, (project,) = await seed()
        client_id, project_id = client.id, project.id

        refused = await delete_client.execute("user_1", client_id)
        await DeleteProject(
            SqlAlchemyUnitOfWork(db_session),
            SqlAlchemyProjectRepository(db_session),
            SqlAlchemyTrialRepository(db_session),
        ).execute("user_1", project_id)
        deleted = await delete_client.execute("user_1", client_id)

        assert refused.error.code == "CLIENT_IN_USE"
        assert deleted.is_ok()
        assert await SqlAlchemyClientRepository(db_session).get_by_id(client_id) is None

    async def test_other_users_client_is_not_deleted(self, delete_client, db_session, seed):
        client, _ = await seed(project_names=())
        client_id = client.id

        result = await delete_client.execute("user_2", client_id)

        assert result.error.code == "CLIENT_NOT_FOUND"
        assert await SqlAlchemyClientRepository(db_session).get_by_id(client_id) is not None
