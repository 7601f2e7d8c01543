from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import AuthError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.value_objects.role import Role
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher


@dataclass(slots=True)
class LoginInput:
    email: str
    password: str


@dataclass(slots=True)
class LoginResult:
    access_token: str
    token_type: str
    expires_in: int
    user_id: UUID
    email: str
    name: str | None
    role: Role


async def execute(
    *,
    uow: UnitOfWork,
    payload: LoginInput,
    password_hasher: PasswordHasher,
    jwt_service: JWTService,
) -> LoginResult:
    user = await uow.users.get_by_email(payload.email.lower())
    if not user or not user.is_active:
        raise AuthError("Invalid credentials")
    if not password_hasher.verify(payload.password, user.hashed_password):
        raise AuthError("Invalid credentials")
    if password_hasher.needs_rehash(user.hashed_password):
        await uow.users.update_password(user.id, password_hasher.hash(payload.password))
        await uow.commit()

    token = jwt_service.issue_for(user)
    return LoginResult(
        access_token=token,
        token_type="bearer",
        expires_in=jwt_service.expires_in_seconds,
        user_id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
    )
