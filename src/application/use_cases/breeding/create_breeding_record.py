from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.reference_registrar import allocate_reference
from src.domain.models.breeding_record import BreedingRecord
from src.domain.value_objects.goat_status import Gender
from src.domain.value_objects.record_kind import RecordKind
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class CreateBreedingRecordInput:
    male_goat_id: UUID
    female_goat_id: UUID
    breeding_date: date
    method: str | None = None
    expected_kid_date: date | None = None
    actual_kid_date: date | None = None
    kids_born: int | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    payload: CreateBreedingRecordInput,
    *,
    gestation_days: int,
) -> BreedingRecord:
    if not role.can_create():
        raise PermissionDenied("Role not allowed to create breeding records")
    if payload.male_goat_id == payload.female_goat_id:
        raise ValidationError("Male and female goat must be different")
    goats = await uow.goats.get_many([payload.male_goat_id, payload.female_goat_id])
    male = goats.get(payload.male_goat_id)
    female = goats.get(payload.female_goat_id)
    if male is None:
        raise NotFound("Male goat not found")
    if female is None:
        raise NotFound("Female goat not found")
    if male.gender != Gender.MALE.value:
        raise ValidationError("Selected buck is not a male goat")
    if female.gender != Gender.FEMALE.value:
        raise ValidationError("Selected doe is not a female goat")
    if payload.actual_kid_date and payload.actual_kid_date < payload.breeding_date:
        raise ValidationError("Kidding date cannot precede breeding date")

    reference_no = await allocate_reference(uow, RecordKind.BREEDING)
    record = BreedingRecord.create(
        reference_no=reference_no,
        male_goat_id=payload.male_goat_id,
        female_goat_id=payload.female_goat_id,
        breeding_date=payload.breeding_date,
        gestation_days=gestation_days,
        method=payload.method,
        expected_kid_date=payload.expected_kid_date,
        actual_kid_date=payload.actual_kid_date,
        kids_born=payload.kids_born,
        notes=payload.notes,
        created_by=actor_user_id,
    )
    created = await uow.breeding_records.add(record)
    await uow.commit()
    return created
