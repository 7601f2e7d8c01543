from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from src.application.errors import ConflictError
from src.domain.models.expense import Expense
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


async def make_goat(client, headers, tag_no: str, gender: str = "Female") -> str:
    response = await client.post(
        "/api/v1/goats",
        json={"tag_no": tag_no, "breed": "Boer", "gender": gender},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


def current_year() -> int:
    return datetime.now(timezone.utc).year


async def test_each_kind_numbers_sequentially(client, auth_headers):
    admin = auth_headers("admin")
    year = current_year()
    buck = await make_goat(client, admin, "B-1", gender="Male")
    does = [await make_goat(client, admin, f"D-{i}") for i in range(3)]

    breeding = []
    health = []
    expenses = []
    inventory = []
    sales = []
    for i, doe in enumerate(does):
        r = await client.post(
            "/api/v1/breeding",
            json={"male_goat_id": buck, "female_goat_id": doe, "breeding_date": "2026-01-10"},
            headers=admin,
        )
        breeding.append(r.json()["reference_no"])
        r = await client.post(
            "/api/v1/health",
            json={"goat_id": doe, "record_type": "Vaccination", "record_date": "2026-01-11"},
            headers=admin,
        )
        health.append(r.json()["reference_no"])
        r = await client.post(
            "/api/v1/expenses",
            json={"expense_date": "2026-01-12", "category": "Feed", "amount": "10.00"},
            headers=admin,
        )
        expenses.append(r.json()["reference_no"])
        r = await client.post(
            "/api/v1/inventory",
            json={"item_name": f"Hay {i}", "category": "Feed", "quantity": "5", "unit": "bale"},
            headers=admin,
        )
        inventory.append(r.json()["reference_no"])
        r = await client.post(
            "/api/v1/sales",
            json={"goat_id": doe, "sale_date": "2026-02-01", "sale_price": "150.00"},
            headers=admin,
        )
        sales.append(r.json()["reference_no"])

    for prefix, refs in (
        ("BR", breeding),
        ("HR", health),
        ("EXP", expenses),
        ("INV", inventory),
        ("SR", sales),
    ):
        assert refs == [f"{prefix}-{year}-{n:04d}" for n in (1, 2, 3)]


async def test_reference_is_not_reissued_after_delete(client, auth_headers):
    admin = auth_headers("admin")
    year = current_year()
    goat_id = await make_goat(client, admin, "H-1")
    first = await client.post(
        "/api/v1/health",
        json={"goat_id": goat_id, "record_type": "Deworming", "record_date": "2026-03-01"},
        headers=admin,
    )
    assert first.json()["reference_no"] == f"HR-{year}-0001"

    # the goat's health records go with it
    deleted = await client.delete(f"/api/v1/goats/{goat_id}", headers=admin)
    assert deleted.status_code == 204
    listing = await client.get("/api/v1/health", headers=admin)
    assert listing.json() == []

    other = await make_goat(client, admin, "H-2")
    second = await client.post(
        "/api/v1/health",
        json={"goat_id": other, "record_type": "Checkup", "record_date": "2026-03-02"},
        headers=admin,
    )
    assert second.json()["reference_no"] == f"HR-{year}-0002"


async def test_duplicate_reference_number_is_rejected(app, client, auth_headers):
    admin = auth_headers("admin")
    created = await client.post(
        "/api/v1/expenses",
        json={"expense_date": "2026-01-12", "category": "Labour", "amount": "80.00"},
        headers=admin,
    )
    reference_no = created.json()["reference_no"]

    uow = SQLAlchemyUnitOfWork(app.state.session_factory)
    async with uow:
        with pytest.raises(ConflictError):
            await uow.expenses.add(
                Expense.create(
                    reference_no=reference_no,
                    expense_date=date(2026, 1, 12),
                    category="Labour",
                    amount=Decimal("1.00"),
                )
            )
