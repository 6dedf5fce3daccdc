"""Integration tests for the HTTP API"""

import pytest
from decimal import Decimal
from httpx import AsyncClient

USER = {"X-User-Id": "user_api_1"}
OTHER_USER = {"X-User-Id": "user_api_2"}


async def create_client(client: AsyncClient, headers=USER) -> dict:
    response = await client.post(
        "/api/clients",
        json={"name": "Jane Doe", "email": "jane@example.com", "company_name": "Acme Ltd"},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


async def create_project(client: AsyncClient, client_id: str, name="Website", headers=USER) -> dict:
    response = await client.post(
        "/api/projects", json={"client_id": client_id, "name": name}, headers=headers
    )
    assert response.status_code == 201
    return response.json()


class TestAuthAndHealth:
    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_missing_user_header(self, client: AsyncClient):
        response = await client.get("/api/projects")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHENTICATED"


class TestClientsAPI:
    @pytest.mark.asyncio
    async def test_update_and_delete(self, client: AsyncClient):
        owner = await create_client(client)
        project = await create_project(client, owner["id"])

        response = await client.put(
            f"/api/clients/{owner['id']}", json={"phone": "555-0100"}, headers=USER
        )
        assert response.status_code == 200
        assert response.json()["phone"] == "555-0100"
        assert response.json()["company_name"] == "Acme Ltd"

        response = await client.delete(f"/api/clients/{owner['id']}", headers=USER)
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "CLIENT_IN_USE"

        await client.delete(f"/api/projects/{project['id']}", headers=USER)
        response = await client.delete(f"/api/clients/{owner['id']}", headers=USER)
        assert response.status_code == 200

        response = await client.get(f"/api/clients/{owner['id']}", headers=USER)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_other_users_client_is_not_found(self, client: AsyncClient):
        owner = await create_client(client)

        response = await client.put(
            f"/api/clients/{owner['id']}", json={"name": "Mallory"}, headers=OTHER_USER
        )
        assert response.status_code == 404

        response = await client.delete(f"/api/clients/{owner['id']}", headers=OTHER_USER)
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "CLIENT_NOT_FOUND"


class TestProjectsAPI:
    @pytest.mark.asyncio
    async def test_timer_switch(self, client: AsyncClient):
        owner = await create_client(client)
        a = await create_project(client, owner["id"], "A")
        b = await create_project(client, owner["id"], "B")

        response = await client.post(f"/api/projects/{a['id']}/timer/start", headers=USER)
        assert response.status_code == 200
        assert response.json()["project"]["is_running"] is True

        response = await client.post(f"/api/projects/{b['id']}/timer/start", headers=USER)
        assert response.status_code == 200
        assert response.json()["stopped_project_ids"] == [a["id"]]

        response = await client.get("/api/projects", headers=USER)
        running = [p["id"] for p in response.json() if p["is_running"]]
        assert running == [b["id"]]

    @pytest.mark.asyncio
    async def test_stop_with_committed_elapsed(self, client: AsyncClient):
        owner = await create_client(client)
        project = await create_project(client, owner["id"])
        await client.post(f"/api/projects/{project['id']}/timer/start", headers=USER)

        response = await client.post(
            f"/api/projects/{project['id']}/timer/stop",
            json={"committed_elapsed_ms": 5400000},
            headers=USER,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["stopped"] is True
        assert data["committed_ms"] == 5400000
        assert data["project"]["total_time_spent"] == 5400000
        assert data["project"]["is_running"] is False

    @pytest.mark.asyncio
    async def test_stop_idle_and_stop_active(self, client: AsyncClient):
        owner = await create_client(client)
        project = await create_project(client, owner["id"])

        response = await client.post(f"/api/projects/{project['id']}/timer/stop", headers=USER)
        assert response.status_code == 200
        assert response.json()["stopped"] is False
        assert response.json()["message"] == "No active timer found"

        response = await client.post("/api/projects/stop-active", headers=USER)
        assert response.status_code == 200
        assert response.json()["stopped"] is False

    @pytest.mark.asyncio
    async def test_negative_committed_elapsed_is_rejected(self, client: AsyncClient):
        owner = await create_client(client)
        project = await create_project(client, owner["id"])

        response = await client.post(
            f"/api/projects/{project['id']}/timer/stop",
            json={"committed_elapsed_ms": -1},
            headers=USER,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_other_users_project_is_not_found(self, client: AsyncClient):
        owner = await create_client(client)
        project = await create_project(client, owner["id"])

        for method, path in [
            ("GET", f"/api/projects/{project['id']}"),
            ("POST", f"/api/projects/{project['id']}/timer/start"),
            ("DELETE", f"/api/projects/{project['id']}"),
        ]:
            response = await client.request(method, path, headers=OTHER_USER)
            assert response.status_code == 404
            assert response.json()["error"]["code"] == "PROJECT_NOT_FOUND"

        response = await client.get(f"/api/projects/{project['id']}", headers=USER)
        assert response.status_code == 200
        assert response.json()["is_running"] is False

    @pytest.mark.asyncio
    async def test_update_and_delete(self, client: AsyncClient):
        owner = await create_client(client)
        project = await create_project(client, owner["id"])

        response = await client.put(
            f"/api/projects/{project['id']}",
            json={"status": "In Progress", "progress": 50},
            headers=USER,
        )
        assert response.status_code == 200
        assert response.json()["status"] == "In Progress"

        response = await client.put(
            f"/api/projects/{project['id']}", json={"progress": 150}, headers=USER
        )
        assert response.status_code == 400

        response = await client.delete(f"/api/projects/{project['id']}", headers=USER)
        assert response.status_code == 200

        response = await client.get(f"/api/projects/{project['id']}", headers=USER)
        assert response.status_code == 404


class TestTrialsAPI:
    @pytest.mark.asyncio
    async def test_fourth_trial_is_charged(self, client: AsyncClient):
        owner = await create_client(client)
        project = await create_project(client, owner["id"])

        trials = []
        for _ in range(4):
            response = await client.post(
                "/api/trials", json={"project_id": project["id"]}, headers=USER
            )
            assert response.status_code == 201
            trials.append(response.json())

        assert [t["is_extra"] for t in trials] == [False, False, False, True]
        assert Decimal(trials[3]["cost"]) == Decimal("10.00")

        response = await client.get(f"/api/trials/project/{project['id']}", headers=USER)
        assert len(response.json()) == 4

    @pytest.mark.asyncio
    async def test_trial_on_unknown_project(self, client: AsyncClient):
        response = await client.post("/api/trials", json={"project_id": "missing"}, headers=USER)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "PROJECT_NOT_FOUND"


class TestInvoicesAPI:
    @pytest.mark.asyncio
    async def test_create_update_and_list(self, client: AsyncClient):
        owner = await create_client(client)
        payload = {
            "client_id": owner["id"],
            "invoice_number": "INV-API-1",
            "due_date": "2024-02-15",
            "items": [{"description": "Design work", "quantity": "2", "rate": "50"}],
            "discount": "10",
            "tax_rate": "10",
            "shipping": "5",
        }

        response = await client.post("/api/invoices", json=payload, headers=USER)
        assert response.status_code == 201
        invoice = response.json()
        assert Decimal(invoice["subtotal"]) == Decimal("100")
        assert Decimal(invoice["tax_amount"]) == Decimal("9")
        assert Decimal(invoice["total_amount"]) == Decimal("104")

        response = await client.post("/api/invoices", json=payload, headers=USER)
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "INVOICE_NUMBER_EXISTS"

        response = await client.put(
            f"/api/invoices/{invoice['id']}", json={"status": "Complete"}, headers=USER
        )
        assert response.status_code == 200
        assert response.json()["status"] == "Complete"

        response = await client.get("/api/invoices", params={"status": "Complete"}, headers=USER)
        assert [i["id"] for i in response.json()["invoices"]] == [invoice["id"]]

    @pytest.mark.asyncio
    async def test_negative_quantity_is_rejected(self, client: AsyncClient):
        owner = await create_client(client)

        response = await client.post(
            "/api/invoices",
            json={
                "client_id": owner["id"],
                "due_date": "2024-02-15",
                "items": [{"description": "Design work", "quantity": "-1", "rate": "50"}],
            },
            headers=USER,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_other_users_invoice_is_not_found(self, client: AsyncClient):
        owner = await create_client(client)
        response = await client.post(
            "/api/invoices",
            json={"client_id": owner["id"], "due_date": "2024-02-15"},
            headers=USER,
        )
        invoice_id = response.json()["id"]

        response = await client.get(f"/api/invoices/{invoice_id}", headers=OTHER_USER)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "INVOICE_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_lettered_number_does_not_break_numbering(self, client: AsyncClient):
        owner = await create_client(client)
        payload = {"client_id": owner["id"], "due_date": "2024-02-15"}

        first = await client.post("/api/invoices", json=payload, headers=USER)
        prefix = first.json()["invoice_number"][: -len("000001")]
        lettered = await client.post(
            "/api/invoices", json={**payload, "invoice_number": f"{prefix}ACME01"}, headers=USER
        )
        second = await client.post("/api/invoices", json=payload, headers=USER)

        assert first.status_code == 201
        assert lettered.status_code == 400
        assert lettered.json()["error"]["code"] == "VALIDATION_ERROR"
        assert second.status_code == 201
        assert second.json()["invoice_number"] == f"{prefix}000002"


class TestDashboardAPI:
    @pytest.mark.asyncio
    async def test_stats(self, client: AsyncClient):
        owner = await create_client(client)
        project = await create_project(client, owner["id"])
        await client.post(f"/api/projects/{project['id']}/timer/start", headers=USER)
        await client.post(
            "/api/invoices",
            json={
                "client_id": owner["id"],
                "due_date": "2024-02-15",
                "items": [{"description": "Design work", "quantity": "1", "rate": "80"}],
            },
            headers=USER,
        )

        response = await client.get("/api/dashboard/stats", headers=USER)

        assert response.status_code == 200
        data = response.json()
        assert data["total_clients"] == 1
        assert data["pending_invoices"] == 1
        assert Decimal(data["unpaid_amount"]) == Decimal("80")
        assert data["active_timer"]["id"] == project["id"]
        assert data["active_timer"]["client_name"] == "Jane Doe"
        assert data["recent_invoices"][0]["client_name"] == "Jane Doe"
        assert data["total_earning"] == "0.000000"

        response = await client.get("/api/dashboard/stats", headers=OTHER_USER)
        assert response.json()["total_clients"] == 0
        assert response.json()["active_timer"] is None
