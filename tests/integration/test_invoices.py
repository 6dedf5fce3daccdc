"""Integration tests for invoice totals with a real database

Tests cover:
- Stored totals match the derived totals
- Updates re-derive totals and replace items
- Invoice number uniqueness (global across users) and generation
- Generation skips numbers whose suffix is not numeric
- Reconciliation repairs drifted totals
"""

import pytest
from datetime import date, datetime
from decimal import Decimal

from src.adapter.repositories import (
    SqlAlchemyClientRepository,
    SqlAlchemyInvoiceItemRepository,
    SqlAlchemyInvoiceRepository,
    SqlAlchemyProjectRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.billing import (
    CreateInvoice,
    CreateInvoiceCommandDTO,
    InvoiceItemInputDTO,
    ReconcileInvoiceTotals,
    UpdateInvoice,
    UpdateInvoiceCommandDTO,
)
from src.domain.invoice import Invoice


def invoice_command(client_id, **overrides):
    fields = dict(
        client_id=client_id,
        due_date=date(2024, 2, 15),
        items=[InvoiceItemInputDTO(description="Design work", quantity=Decimal("2"), rate=Decimal("50"))],
        discount=Decimal("10"),
        tax_rate=Decimal("10"),
        shipping=Decimal("5"),
    )
    fields.update(overrides)
    return CreateInvoiceCommandDTO(**fields)


@pytest.fixture
def repos(db_session):
    return dict(
        uow=SqlAlchemyUnitOfWork(db_session),
        invoice_repo=SqlAlchemyInvoiceRepository(db_session),
        item_repo=SqlAlchemyInvoiceItemRepository(db_session),
        client_repo=SqlAlchemyClientRepository(db_session),
        project_repo=SqlAlchemyProjectRepository(db_session),
    )


@pytest.fixture
def create_invoice(repos):
    return CreateInvoice(**repos)


@pytest.mark.asyncio
class TestInvoiceTotalsIntegration:
    async def test_created_invoice_stores_derived_totals(self, create_invoice, repos, seed):
        client, _ = await seed()

        result = await create_invoice.execute("user_1", invoice_command(client.id))

        assert result.is_ok()
        stored = await repos["invoice_repo"].get_by_id(result.value.id)
        items = await repos["item_repo"].get_by_invoice_id(stored.id)
        assert stored.subtotal == Decimal("100")
        assert stored.total_amount == Decimal("104")
        assert [(i.description, i.amount) for i in items] == [("Design work", Decimal("100"))]
        assert stored.invoice_number.startswith("INV-")

    async def test_update_items_rederives_totals(self, create_invoice, repos, seed):
        client, _ = await seed()
        created = (await create_invoice.execute("user_1", invoice_command(client.id))).value
        update = UpdateInvoice(repos["uow"], repos["invoice_repo"], repos["item_repo"])

        result = await update.execute(
            "user_1",
            created.id,
            UpdateInvoiceCommandDTO(
                items=[
                    InvoiceItemInputDTO(description="Design", quantity=Decimal("1"), rate=Decimal("40")),
                    InvoiceItemInputDTO(description="Hosting", quantity=Decimal("2"), rate=Decimal("15")),
                ],
                tax_rate=Decimal("0"),
            ),
        )

        assert result.is_ok()
        assert result.value.subtotal == Decimal("70")
        assert result.value.total_amount == Decimal("65")
        items = await repos["item_repo"].get_by_invoice_id(created.id)
        assert [i.description for i in items] == ["Design", "Hosting"]

    async def test_duplicate_number_is_rejected(self, create_invoice, seed):
        client, _ = await seed()
        client_id = client.id
        await create_invoice.execute("user_1", invoice_command(client_id, invoice_number="INV-7"))

        result = await create_invoice.execute("user_1", invoice_command(client_id, invoice_number="INV-7"))

        assert result.is_err()
        assert result.error.code == "INVOICE_NUMBER_EXISTS"

    async def test_generated_numbers_are_unique(self, create_invoice, seed):
        client, _ = await seed()
        client_id = client.id

        numbers = set()
        for _ in range(3):
            numbers.add((await create_invoice.execute("user_1", invoice_command(client_id))).value.invoice_number)

        assert len(numbers) == 3

    async def test_reconciliation_repairs_drift(self, create_invoice, repos, db_session, seed):
        client, _ = await seed()
        created = (await create_invoice.execute("user_1", invoice_command(client.id))).value
        stored = await repos["invoice_repo"].get_by_id(created.id)
        stored.total_amount = Decimal("999")
        await repos["invoice_repo"].update(stored)
        await db_session.commit()

        reconcile = ReconcileInvoiceTotals(repos["uow"], repos["invoice_repo"], repos["item_repo"])
        report = await reconcile.execute(repair=False)
        assert report.value.discrepancies_found == 1

        repaired = await reconcile.execute(repair=True)
        assert repaired.value.repaired is True

        stored = await repos["invoice_repo"].get_by_id(created.id)
        assert stored.total_amount == Decimal("104")
        assert (await reconcile.execute()).value.discrepancies_found == 0

    async def test_non_numeric_suffix_does_not_stall_generation(self, create_invoice, repos, db_session, seed):
        client, _ = await seed()
        client_id = client.id
        prefix = f"INV-{datetime.utcnow().year}-"
        first = (await create_invoice.execute("user_1", invoice_command(client_id))).value
        db_session.add(
            Invoice(
                user_id="user_1",
                client_id=client_id,
                invoice_number=f"{prefix}ACME01",
                invoice_date=date(2024, 1, 1),
                due_date=date(2024, 1, 31),
                subtotal=Decimal("0"),
                discount=Decimal("0"),
                tax_rate=Decimal("0"),
                shipping=Decimal("0"),
                total_amount=Decimal("0"),
            )
        )
        await db_session.commit()

        result = await create_invoice.execute("user_1", invoice_command(client_id))

        assert first.invoice_number == f"{prefix}000001"
        assert result.is_ok()
        assert result.value.invoice_number == f"{prefix}000002"

    async def test_generated_shape_with_letters_is_refused(self, create_invoice, seed):
        client, _ = await seed()
        client_id = client.id
        prefix = f"INV-{datetime.utcnow().year}-"
        await create_invoice.execute("user_1", invoice_command(client_id))

        refused = await create_invoice.execute("user_1", invoice_command(client_id, invoice_number=f"{prefix}ACME01"))
        following = await create_invoice.execute("user_1", invoice_command(client_id))

        assert refused.is_err()
        assert refused.error.code == "VALIDATION_ERROR"
        assert following.is_ok()
        assert following.value.invoice_number == f"{prefix}000002"

    async def test_invoice_numbers_are_unique_across_users(self, create_invoice, seed):
        client, _ = await seed()
        other_client, _ = await seed("user_2")
        client_id, other_client_id = client.id, other_client.id
        await create_invoice.execute("user_1", invoice_command(client_id, invoice_number="ACME-1"))

        result = await create_invoice.execute("user_2", invoice_command(other_client_id, invoice_number="ACME-1"))

        assert result.is_err()
        assert result.error.code == "INVOICE_NUMBER_EXISTS"
