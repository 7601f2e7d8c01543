from __future__ import annotations

import asyncio
from uuid import uuid4

from src.application.errors import InfrastructureError
from src.infrastructure.repos.sales_records_sqlalchemy import SalesRecordsSQLAlchemyRepository


async def make_goat(client, headers, tag_no: str = "S-1") -> str:
    response = await client.post(
        "/api/v1/goats",
        json={"tag_no": tag_no, "breed": "Boer", "gender": "Male"},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


def sale(goat_id: str, price: str = "300.00") -> dict:
    return {
        "goat_id": goat_id,
        "sale_date": "2026-06-01",
        "sale_price": price,
        "buyer_name": "Market Co",
        "sale_type": "Meat",
    }


async def test_sale_marks_goat_sold(client, auth_headers):
    staff = auth_headers("staff")
    goat_id = await make_goat(client, staff)

    response = await client.post("/api/v1/sales", json=sale(goat_id), headers=staff)
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["sale_type"] == "Meat"
    assert body["payment_status"] == "Paid"
    assert body["goat"]["tag_no"] == "S-1"

    goat = await client.get(f"/api/v1/goats/{goat_id}", headers=staff)
    assert goat.json()["status"] == "Sold"

    again = await client.post("/api/v1/sales", json=sale(goat_id), headers=staff)
    assert again.status_code == 409

    listing = await client.get("/api/v1/sales", params={"goatId": goat_id}, headers=staff)
    assert [s["reference_no"] for s in listing.json()] == [body["reference_no"]]


async def test_sale_of_unknown_goat_is_not_found(client, auth_headers):
    response = await client.post(
        "/api/v1/sales", json=sale(str(uuid4())), headers=auth_headers("admin")
    )
    assert response.status_code == 404


async def test_failed_sale_leaves_goat_active(client, auth_headers, monkeypatch):
    admin = auth_headers("admin")
    goat_id = await make_goat(client, admin, "S-2")

    async def failing_add(self, record):
        raise InfrastructureError("Sales storage unavailable")

    monkeypatch.setattr(SalesRecordsSQLAlchemyRepository, "add", failing_add)
    response = await client.post("/api/v1/sales", json=sale(goat_id), headers=admin)
    assert response.status_code == 500
    monkeypatch.undo()

    goat = await client.get(f"/api/v1/goats/{goat_id}", headers=admin)
    assert goat.json()["status"] == "Active"
    listing = await client.get("/api/v1/sales", headers=admin)
    assert listing.json() == []


async def test_goat_with_sales_cannot_be_deleted(client, auth_headers):
    admin = auth_headers("admin")
    goat_id = await make_goat(client, admin, "S-3")
    await client.post("/api/v1/sales", json=sale(goat_id), headers=admin)

    response = await client.delete(f"/api/v1/goats/{goat_id}", headers=admin)
    assert response.status_code == 409


async def test_viewer_cannot_record_sale(client, auth_headers):
    goat_id = await make_goat(client, auth_headers("admin"), "S-4")
    response = await client.post("/api/v1/sales", json=sale(goat_id), headers=auth_headers("viewer"))
    assert response.status_code == 403


async def test_concurrent_sales_of_one_goat_sell_it_once(client, auth_headers):
    admin = auth_headers("admin")
    goat_id = await make_goat(client, admin, "S-5")

    first, second = await asyncio.gather(
        client.post("/api/v1/sales", json=sale(goat_id), headers=admin),
        client.post("/api/v1/sales", json=sale(goat_id, "310.00"), headers=admin),
    )
    assert sorted([first.status_code, second.status_code]) == [201, 409]

    listing = await client.get("/api/v1/sales", params={"goatId": goat_id}, headers=admin)
    assert len(listing.json()) == 1


async def test_concurrent_sales_get_distinct_references(client, auth_headers):
    admin = auth_headers("admin")
    buck = await make_goat(client, admin, "S-6")
    wether = await make_goat(client, admin, "S-7")

    responses = await asyncio.gather(
        client.post("/api/v1/sales", json=sale(buck), headers=admin),
        client.post("/api/v1/sales", json=sale(wether), headers=admin),
    )
    assert [r.status_code for r in responses] == [201, 201]
    references = {r.json()["reference_no"] for r in responses}
    assert len(references) == 2
