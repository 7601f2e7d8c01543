from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import ConflictError, NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.goats.create_goat import validate_parents
from src.domain.models.goat import Goat
from src.domain.value_objects.role import Role

UPDATABLE_FIELDS = (
    "tag_no",
    "breed",
    "gender",
    "name",
    "birth_date",
    "status",
    "weight",
    "purpose",
    "source",
    "purchase_price",
    "purchase_date",
    "notes",
    # Genealogy fields
    "sire_id",
    "dam_id",
)


@dataclass(slots=True)
class UpdateGoatInput:
    version: int | None = None
    tag_no: str | None = None
    breed: str | None = None
    gender: str | None = None
    name: str | None = None
    birth_date: date | None = None
    status: str | None = None
    weight: Decimal | None = None
    purpose: str | None = None
    source: str | None = None
    purchase_price: Decimal | None = None
    purchase_date: date | None = None
    notes: str | None = None
    sire_id: UUID | None = None
    dam_id: UUID | None = None


def ensure_can_update(role: Role) -> None:
    if not role.can_update():
        raise PermissionDenied("Role not allowed to update goats")


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    goat_id: UUID,
    payload: UpdateGoatInput,
) -> Goat:
    ensure_can_update(role)
    if payload.version is not None and payload.version < 1:
        raise ValidationError("Invalid version value")
    existing = await uow.goats.get(goat_id)
    if not existing:
        raise NotFound("Goat not found")
    data: dict = {}
    for field_name in UPDATABLE_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if not data:
        return existing
    if "sire_id" in data or "dam_id" in data:
        await validate_parents(
            uow,
            data.get("sire_id"),
            data.get("dam_id"),
            goat_id=goat_id,
        )
    data["updated_by"] = actor_user_id
    updated = await uow.goats.update(goat_id, data, expected_version=payload.version)
    if not updated:
        raise ConflictError("Version mismatch while updating goat")
    await uow.commit()
    return updated
