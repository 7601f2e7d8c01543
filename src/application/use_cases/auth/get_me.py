from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from src.domain.value_objects.role import Role


@dataclass(slots=True)
class MeResult:
    user_id: UUID
    email: str
    name: str | None
    role: Role
    permissions: dict[str, bool]
    claims: dict[str, Any]


async def execute(
    *,
    user_id: UUID,
    email: str,
    name: str | None,
    role: Role,
    claims: dict[str, Any],
) -> MeResult:
    permissions = {
        "create": role.can_create(),
        "update": role.can_update(),
        "delete": role.can_delete(),
    }
    return MeResult(
        user_id=user_id,
        email=email,
        name=name,
        role=role,
        permissions=permissions,
        claims=claims,
    )
