from __future__ import annotations

from sqlalchemy import func, select

from src.infrastructure.db.orm.user import UserORM


async def test_seed_creates_admin_once(app, client):
    first = await client.post("/api/v1/seed")
    assert first.status_code == 201, first.text
    body = first.json()
    assert body["email"] == "admin@goatfarm.com"
    assert body["role"] == "ADMIN"

    second = await client.post("/api/v1/seed")
    assert second.status_code == 400
    assert second.json()["error"] == "Admin already exists"

    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        count = await session.scalar(
            select(func.count(UserORM.id)).where(UserORM.email == "admin@goatfarm.com")
        )
    assert count == 1


async def test_seeded_admin_can_log_in(client):
    await client.post("/api/v1/seed")
    response = await client.post(
        "/api/v1/auth/login", json={"email": "admin@goatfarm.com", "password": "admin123"}
    )
    assert response.status_code == 200, response.text
    assert response.json()["role"] == "ADMIN"


async def test_login_sets_session_cookie(client, seeded_users, test_password):
    response = await client.post(
        "/api/v1/auth/login",
        json={"email": "staff@goatfarm.com", "password": test_password},
    )
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["role"] == "STAFF"
    cookie_header = response.headers["set-cookie"]
    assert cookie_header.startswith("session=")
    assert "HttpOnly" in cookie_header

    token = response.cookies["session"]
    me = await client.get("/api/v1/me", headers={"Cookie": f"session={token}"})
    assert me.status_code == 200, me.text
    me_body = me.json()
    assert me_body["email"] == "staff@goatfarm.com"
    assert me_body["permissions"] == {"create": True, "update": True, "delete": True}


async def test_bearer_token_identifies_viewer(client, auth_headers):
    me = await client.get("/api/v1/me", headers=auth_headers("viewer"))
    assert me.status_code == 200
    assert me.json()["role"] == "VIEWER"
    assert me.json()["permissions"]["delete"] is False


async def test_wrong_password_is_unauthorized(client, seeded_users):
    response = await client.post(
        "/api/v1/auth/login", json={"email": "staff@goatfarm.com", "password": "wrong"}
    )
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials", "code": "auth_error"}


async def test_invalid_token_is_rejected(client):
    response = await client.get("/api/v1/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


async def test_logout_clears_cookie(client):
    response = await client.post("/api/v1/auth/logout")
    assert response.status_code == 200
    assert "Max-Age=0" in response.headers["set-cookie"]


async def test_health_check_is_public(client):
    response = await client.get("/api/v1/health-check")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "environment": "test"}
