from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, EmailStr

from src.domain.value_objects.role import Role


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str
    expires_in: int
    user_id: UUID
    email: EmailStr
    name: str | None = None
    role: Role


class MeResponse(BaseModel):
    user_id: UUID
    email: EmailStr
    name: str | None = None
    role: Role
    permissions: dict[str, bool]
    claims: dict[str, Any]


class SeedResponse(BaseModel):
    message: str
    user_id: UUID
    email: EmailStr
    role: Role
