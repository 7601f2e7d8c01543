from __future__ import annotations

import base64


async def seed_records(client, headers) -> None:
    goat = await client.post(
        "/api/v1/goats",
        json={"tag_no": "R-1", "breed": "Boer", "gender": "Male"},
        headers=headers,
    )
    await client.post(
        "/api/v1/goats",
        json={"tag_no": "R-2", "breed": "Kiko", "gender": "Female"},
        headers=headers,
    )
    await client.post(
        "/api/v1/sales",
        json={"goat_id": goat.json()["id"], "sale_date": "2026-03-05", "sale_price": "420.00"},
        headers=headers,
    )
    await client.post(
        "/api/v1/expenses",
        json={"expense_date": "2026-03-02", "category": "Feed", "amount": "120.50"},
        headers=headers,
    )
    await client.post(
        "/api/v1/inventory",
        json={
            "item_name": "Dewormer",
            "category": "Medicine",
            "quantity": "2",
            "unit": "bottle",
            "min_stock": "3",
            "unit_price": "15.00",
            "expiry_date": "2026-03-20",
        },
        headers=headers,
    )


RANGE = {"date_from": "2026-03-01", "date_to": "2026-03-31"}


async def test_report_definitions(client, auth_headers):
    response = await client.get("/api/v1/reports/definitions", headers=auth_headers("viewer"))
    assert response.status_code == 200
    assert [r["id"] for r in response.json()["reports"]] == ["herd", "financial", "inventory"]


async def test_financial_report_json(client, auth_headers):
    admin = auth_headers("admin")
    await seed_records(client, admin)

    response = await client.post(
        "/api/v1/reports/financial", json={**RANGE, "format": "json"}, headers=admin
    )
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["file_name"] == "financial_2026-03-01_2026-03-31.json"
    summary = body["data"]["summary"]
    assert summary["total_income"] == 420.0
    assert summary["total_expenses"] == 120.5
    assert summary["net_profit"] == 299.5
    assert body["data"]["monthly"] == [
        {"month": "2026-03", "income": 420.0, "expenses": 120.5, "net": 299.5}
    ]


async def test_herd_and_inventory_reports_json(client, auth_headers):
    admin = auth_headers("admin")
    await seed_records(client, admin)

    herd = await client.post("/api/v1/reports/herd", json={**RANGE, "format": "json"}, headers=admin)
    assert herd.status_code == 200, herd.text
    herd_summary = herd.json()["data"]["summary"]
    assert herd_summary["total_goats"] == 2
    assert herd_summary["active_goats"] == 1
    assert herd_summary["sold_in_period"] == 1

    inventory = await client.post(
        "/api/v1/reports/inventory", json={**RANGE, "format": "json"}, headers=admin
    )
    assert inventory.status_code == 200, inventory.text
    inv_summary = inventory.json()["data"]["summary"]
    assert inv_summary["low_stock_items"] == 1
    assert inv_summary["stock_value"] == 30.0
    assert inv_summary["expiring_items"] == 1


async def test_pdf_report_is_base64_pdf(client, auth_headers):
    admin = auth_headers("admin")
    await seed_records(client, admin)

    response = await client.post("/api/v1/reports/herd", json=RANGE, headers=admin)
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["format"] == "pdf"
    assert body["data"] is None
    assert base64.b64decode(body["content"]).startswith(b"%PDF")


async def test_report_range_is_validated(client, auth_headers):
    admin = auth_headers("admin")
    reversed_range = await client.post(
        "/api/v1/reports/financial",
        json={"date_from": "2026-04-01", "date_to": "2026-03-01", "format": "json"},
        headers=admin,
    )
    assert reversed_range.status_code == 422

    too_long = await client.post(
        "/api/v1/reports/financial",
        json={"date_from": "2025-01-01", "date_to": "2026-03-01", "format": "json"},
        headers=admin,
    )
    assert too_long.status_code == 422
