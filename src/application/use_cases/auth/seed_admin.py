from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import AlreadyExists
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.user import User
from src.domain.value_objects.role import Role
from src.infrastructure.auth.password import PasswordHasher


@dataclass(slots=True)
class SeedAdminInput:
    email: str
    password: str
    name: str | None = None


@dataclass(slots=True)
class SeedAdminResult:
    user_id: UUID
    email: str
    role: Role


async def execute(
    *, uow: UnitOfWork, payload: SeedAdminInput, password_hasher: PasswordHasher
) -> SeedAdminResult:
    """Create the administrator account once; a second call is rejected."""
    password_hasher.ensure_acceptable(payload.password)
    existing = await uow.users.get_by_email(payload.email)
    if existing:
        raise AlreadyExists("Admin already exists")

    user = User.create(
        email=payload.email,
        hashed_password=password_hasher.hash(payload.password),
        name=payload.name,
        role=Role.ADMIN,
        is_active=True,
    )
    created = await uow.users.add(user)
    await uow.commit()
    return SeedAdminResult(user_id=created.id, email=created.email, role=created.role)
