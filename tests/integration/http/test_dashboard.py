from __future__ import annotations

from datetime import date, timedelta

TODAY = date(2026, 8, 10)


def iso(days: int) -> str:
    return (TODAY + timedelta(days=days)).isoformat()


async def make_goat(client, headers, tag_no: str, gender: str, breed: str = "Boer") -> str:
    response = await client.post(
        "/api/v1/goats",
        json={"tag_no": tag_no, "breed": breed, "gender": gender},
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()["id"]


async def test_dashboard_windows_and_low_stock(client, auth_headers):
    admin = auth_headers("admin")
    buck = await make_goat(client, admin, "B-1", "Male")
    doe_a = await make_goat(client, admin, "D-1", "Female")
    doe_b = await make_goat(client, admin, "D-2", "Female", breed="Saanen")

    upcoming = await client.post(
        "/api/v1/breeding",
        json={
            "male_goat_id": buck,
            "female_goat_id": doe_a,
            "breeding_date": iso(-135),
            "expected_kid_date": iso(15),
        },
        headers=admin,
    )
    assert upcoming.status_code == 201, upcoming.text
    kidded = await client.post(
        "/api/v1/breeding",
        json={
            "male_goat_id": buck,
            "female_goat_id": doe_b,
            "breeding_date": iso(-140),
            "expected_kid_date": iso(10),
            "actual_kid_date": iso(-1),
            "kids_born": 2,
        },
        headers=admin,
    )
    assert kidded.status_code == 201, kidded.text

    due_soon = await client.post(
        "/api/v1/health",
        json={
            "goat_id": doe_a,
            "record_type": "Vaccination",
            "record_date": iso(-30),
            "next_due_date": iso(3),
        },
        headers=admin,
    )
    due_later = await client.post(
        "/api/v1/health",
        json={
            "goat_id": doe_b,
            "record_type": "Deworming",
            "record_date": iso(-30),
            "next_due_date": iso(10),
        },
        headers=admin,
    )
    assert due_soon.status_code == 201 and due_later.status_code == 201

    for name, quantity in (("Hay", "5"), ("Minerals", "20")):
        created = await client.post(
            "/api/v1/inventory",
            json={
                "item_name": name,
                "category": "Feed",
                "quantity": quantity,
                "unit": "kg",
                "min_stock": "10",
            },
            headers=admin,
        )
        assert created.status_code == 201, created.text

    await client.post(
        "/api/v1/expenses",
        json={"expense_date": iso(0), "category": "Feed", "amount": "40.00"},
        headers=admin,
    )

    response = await client.get(
        "/api/v1/dashboard", params={"date": TODAY.isoformat()}, headers=auth_headers("viewer")
    )
    assert response.status_code == 200, response.text
    body = response.json()

    assert body["asOf"] == TODAY.isoformat()
    assert body["statistics"]["totalActive"] == 3
    assert body["statistics"]["activeMales"] == 1
    assert body["statistics"]["activeFemales"] == 2
    assert body["breedDistribution"][0] == {"breed": "Boer", "count": 2}

    assert [r["reference_no"] for r in body["upcomingKidding"]] == [
        upcoming.json()["reference_no"]
    ]
    assert body["upcomingKidding"][0]["female_goat"]["tag_no"] == "D-1"
    assert len(body["recentBreeding"]) == 2

    assert [r["reference_no"] for r in body["healthDue"]] == [due_soon.json()["reference_no"]]
    assert [i["item_name"] for i in body["lowStockItems"]] == ["Hay"]

    assert float(body["financial"]["monthlyExpenses"]) == 40.0
    assert float(body["financial"]["net"]) == -40.0
