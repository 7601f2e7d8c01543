from __future__ import annotations

from types import SimpleNamespace

import pytest

from src.application.errors import AlreadyExists, AuthError, ValidationError
from src.application.use_cases.auth import login_user, seed_admin
from src.domain.value_objects.role import Role
from src.infrastructure.auth.password import PasswordHasher


class StubUsersRepo:
    def __init__(self) -> None:
        self.users = {}

    async def get_by_email(self, email):
        return self.users.get(email.lower())

    async def add(self, user):
        self.users[user.email] = user
        return user

    async def update_password(self, user_id, hashed_password):
        for user in self.users.values():
            if user.id == user_id:
                user.hashed_password = hashed_password


class PlainHasher:
    """Marks hashes made before the current scheme with an ``old:`` prefix."""

    def ensure_acceptable(self, password: str) -> None:
        if len(password) < 6:
            raise ValidationError("Password too short")

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        return hashed_password.split(":", 1)[1] == plain_password

    def needs_rehash(self, hashed_password: str) -> bool:
        return hashed_password.startswith("old:")


def make_uow():
    commits: list[bool] = []

    async def commit():
        commits.append(True)

    return SimpleNamespace(users=StubUsersRepo(), commit=commit, commits=commits)


def stub_jwt():
    return SimpleNamespace(issue_for=lambda user: "token", expires_in_seconds=60)


async def seed(uow, password: str = "admin123"):
    return await seed_admin.execute(
        uow=uow,
        payload=seed_admin.SeedAdminInput(email="admin@goatfarm.com", password=password),
        password_hasher=PlainHasher(),
    )


@pytest.mark.asyncio
async def test_seed_admin_creates_admin_once():
    uow = make_uow()
    result = await seed(uow)
    assert result.role is Role.ADMIN

    with pytest.raises(AlreadyExists):
        await seed(uow)
    assert len(uow.users.users) == 1


@pytest.mark.asyncio
async def test_seed_admin_rejects_short_password():
    uow = make_uow()
    with pytest.raises(ValidationError):
        await seed(uow, password="goat")
    assert not uow.users.users


@pytest.mark.asyncio
async def test_login_rejects_wrong_password():
    uow = make_uow()
    await seed(uow)
    with pytest.raises(AuthError):
        await login_user.execute(
            uow=uow,
            payload=login_user.LoginInput(email="admin@goatfarm.com", password="nope"),
            password_hasher=PlainHasher(),
            jwt_service=stub_jwt(),
        )


@pytest.mark.asyncio
async def test_login_upgrades_outdated_hash():
    uow = make_uow()
    await seed(uow)
    admin = uow.users.users["admin@goatfarm.com"]
    admin.hashed_password = "old:admin123"
    seeded_commits = len(uow.commits)

    result = await login_user.execute(
        uow=uow,
        payload=login_user.LoginInput(email="Admin@GoatFarm.com", password="admin123"),
        password_hasher=PlainHasher(),
        jwt_service=stub_jwt(),
    )
    assert result.access_token == "token"
    assert admin.hashed_password == "hashed:admin123"
    assert len(uow.commits) == seeded_commits + 1


def test_password_hasher_flags_weaker_rounds():
    legacy = PasswordHasher(rounds=4).hash("goat-secret")
    current = PasswordHasher(rounds=5)
    assert current.verify("goat-secret", legacy)
    assert current.needs_rehash(legacy)
    assert not current.needs_rehash(current.hash("goat-secret"))


def test_password_hasher_rejects_corrupt_hash():
    assert PasswordHasher(rounds=4).verify("goat-secret", "not-a-hash") is False
