from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from pathlib import Path
from typing import cast
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.domain.value_objects.role import Role
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import (  # noqa: F401
    breeding_record,
    expense,
    goat,
    health_record,
    inventory_item,
    reference_counter,
    sales_record,
    user,
    weight_record,
)
from src.infrastructure.db.orm.user import UserORM
from src.interfaces.http.main import create_app

TEST_PASSWORD = "goat-secret"

_password_hasher = PasswordHasher(rounds=4)
_hashed_test_password = _password_hasher.hash(TEST_PASSWORD)


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "log_level": "INFO",
            "environment": "test",
            "jwt_secret_key": "test-secret",
            "seed_admin_email": "admin@goatfarm.com",
            "seed_admin_password": "admin123",
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings, password_hasher=_password_hasher)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client
    await app.state.engine.dispose()


@pytest.fixture()
async def seeded_users(app, client) -> dict[str, UserORM]:
    users = {
        "admin": UserORM(
            email="owner@goatfarm.com", name="Owner", role=Role.ADMIN, is_active=True
        ),
        "manager": UserORM(
            email="manager@goatfarm.com", name="Manager", role=Role.MANAGER, is_active=True
        ),
        "staff": UserORM(
            email="staff@goatfarm.com", name="Herder", role=Role.STAFF, is_active=True
        ),
        "viewer": UserORM(
            email="viewer@goatfarm.com", name="Visitor", role=Role.VIEWER, is_active=True
        ),
    }
    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        async_session = cast(AsyncSession, session)
        for orm in users.values():
            orm.id = uuid4()
            orm.hashed_password = _hashed_test_password
        async_session.add_all(list(users.values()))
        await async_session.commit()
    return users


@pytest.fixture()
def auth_headers(app, seeded_users):
    def _headers(role: str = "admin") -> dict[str, str]:
        token = app.state.jwt_service.create_access_token(subject=seeded_users[role].id)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture()
def test_password() -> str:
    return TEST_PASSWORD
