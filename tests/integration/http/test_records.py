from __future__ import annotations


async def make_goat(client, headers, tag_no: str, gender: str) -> str:
    response = await client.post(
        "/api/v1/goats",
        json={"tag_no": tag_no, "breed": "Boer", "gender": gender},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


async def test_breeding_records_embed_parents(client, auth_headers):
    admin = auth_headers("admin")
    buck = await make_goat(client, admin, "B-1", "Male")
    doe = await make_goat(client, admin, "D-1", "Female")

    created = await client.post(
        "/api/v1/breeding",
        json={"male_goat_id": buck, "female_goat_id": doe, "breeding_date": "2026-01-01"},
        headers=admin,
    )
    assert created.status_code == 201, created.text
    body = created.json()
    assert body["expected_kid_date"] == "2026-05-31"
    assert body["male_goat"]["tag_no"] == "B-1"

    listing = await client.get("/api/v1/breeding", params={"goatId": doe}, headers=admin)
    assert [r["id"] for r in listing.json()] == [body["id"]]

    swapped = await client.post(
        "/api/v1/breeding",
        json={"male_goat_id": doe, "female_goat_id": buck, "breeding_date": "2026-01-01"},
        headers=admin,
    )
    assert swapped.status_code == 422


async def test_health_records_filter_by_type(client, auth_headers):
    admin = auth_headers("admin")
    doe = await make_goat(client, admin, "D-1", "Female")
    for record_type in ("Vaccination", "Treatment"):
        response = await client.post(
            "/api/v1/health",
            json={"goat_id": doe, "record_type": record_type, "record_date": "2026-02-01"},
            headers=admin,
        )
        assert response.status_code == 201, response.text
        assert response.json()["goat"]["tag_no"] == "D-1"

    vaccinations = await client.get(
        "/api/v1/health", params={"recordType": "Vaccination"}, headers=admin
    )
    assert [r["record_type"] for r in vaccinations.json()] == ["Vaccination"]
    assert vaccinations.json()[0]["goat"]["tag_no"] == "D-1"

    bad_due = await client.post(
        "/api/v1/health",
        json={
            "goat_id": doe,
            "record_type": "Checkup",
            "record_date": "2026-02-10",
            "next_due_date": "2026-02-01",
        },
        headers=admin,
    )
    assert bad_due.status_code == 422


async def test_expenses_filter_by_category_and_range(client, auth_headers):
    admin = auth_headers("admin")
    for expense_date, category in (
        ("2026-01-05", "Feed"),
        ("2026-02-05", "Feed"),
        ("2026-02-06", "Veterinary"),
    ):
        response = await client.post(
            "/api/v1/expenses",
            json={"expense_date": expense_date, "category": category, "amount": "25.00"},
            headers=admin,
        )
        assert response.status_code == 201, response.text

    feed = await client.get("/api/v1/expenses", params={"category": "Feed"}, headers=admin)
    assert len(feed.json()) == 2

    february = await client.get(
        "/api/v1/expenses",
        params={"startDate": "2026-02-01", "endDate": "2026-02-28"},
        headers=admin,
    )
    assert sorted(e["category"] for e in february.json()) == ["Feed", "Veterinary"]

    zero = await client.post(
        "/api/v1/expenses",
        json={"expense_date": "2026-02-07", "category": "Other", "amount": "0"},
        headers=admin,
    )
    assert zero.status_code == 422


async def test_inventory_update_tracks_version(client, auth_headers):
    admin = auth_headers("admin")
    created = await client.post(
        "/api/v1/inventory",
        json={
            "item_name": "Hay",
            "category": "Feed",
            "quantity": "4",
            "unit": "bale",
            "min_stock": "10",
        },
        headers=admin,
    )
    item = created.json()
    assert item["is_low_stock"] is True

    updated = await client.put(
        f"/api/v1/inventory/{item['id']}",
        json={"version": item["version"], "quantity": "40"},
        headers=admin,
    )
    assert updated.status_code == 200, updated.text
    assert updated.json()["is_low_stock"] is False
    assert updated.json()["version"] == item["version"] + 1

    stale = await client.put(
        f"/api/v1/inventory/{item['id']}",
        json={"version": item["version"], "quantity": "1"},
        headers=admin,
    )
    assert stale.status_code == 409

    viewer = await client.put(
        f"/api/v1/inventory/{item['id']}", json={"quantity": "1"}, headers=auth_headers("viewer")
    )
    assert viewer.status_code == 403
