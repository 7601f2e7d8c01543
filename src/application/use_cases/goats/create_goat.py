from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.goat import Goat
from src.domain.value_objects.goat_status import Gender
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class CreateGoatInput:
    tag_no: str
    breed: str
    gender: str
    name: str | None = None
    birth_date: date | None = None
    status: str | None = None
    weight: Decimal | None = None
    purpose: str | None = None
    source: str | None = None
    purchase_price: Decimal | None = None
    purchase_date: date | None = None
    notes: str | None = None
    # Genealogy fields
    sire_id: UUID | None = None
    dam_id: UUID | None = None


def ensure_can_create(role: Role) -> None:
    if not role.can_create():
        raise PermissionDenied("Role not allowed to create goats")


async def validate_parents(
    uow: UnitOfWork, sire_id: UUID | None, dam_id: UUID | None, goat_id: UUID | None = None
) -> None:
    if goat_id is not None and goat_id in (sire_id, dam_id):
        raise ValidationError("A goat cannot be its own parent")
    parents = await uow.goats.get_many([sire_id, dam_id])
    if sire_id is not None:
        sire = parents.get(sire_id)
        if sire is None:
            raise ValidationError("Sire not found")
        if sire.gender != Gender.MALE.value:
            raise ValidationError("Sire must be a male goat")
    if dam_id is not None:
        dam = parents.get(dam_id)
        if dam is None:
            raise ValidationError("Dam not found")
        if dam.gender != Gender.FEMALE.value:
            raise ValidationError("Dam must be a female goat")


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    payload: CreateGoatInput,
) -> Goat:
    ensure_can_create(role)
    tag_no = payload.tag_no.strip()
    if not tag_no:
        raise ValidationError("Tag number is required")
    await validate_parents(uow, payload.sire_id, payload.dam_id)
    goat = Goat.create(
        tag_no=tag_no,
        breed=payload.breed,
        gender=payload.gender,
        name=payload.name,
        birth_date=payload.birth_date,
        status=payload.status,
        weight=payload.weight,
        purpose=payload.purpose,
        source=payload.source,
        purchase_price=payload.purchase_price,
        purchase_date=payload.purchase_date,
        notes=payload.notes,
        sire_id=payload.sire_id,
        dam_id=payload.dam_id,
        created_by=actor_user_id,
    )
    created = await uow.goats.add(goat)
    await uow.commit()
    return created
