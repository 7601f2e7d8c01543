from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.reference_registrar import allocate_reference
from src.domain.models.health_record import HealthRecord
from src.domain.value_objects.record_kind import RecordKind
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class CreateHealthRecordInput:
    goat_id: UUID
    record_type: str
    record_date: date
    description: str | None = None
    medicine: str | None = None
    dosage: str | None = None
    veterinarian: str | None = None
    cost: Decimal | None = None
    next_due_date: date | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    payload: CreateHealthRecordInput,
) -> HealthRecord:
    if not role.can_create():
        raise PermissionDenied("Role not allowed to create health records")
    if payload.next_due_date and payload.next_due_date < payload.record_date:
        raise ValidationError("Next due date cannot precede the treatment date")
    goat = await uow.goats.get(payload.goat_id)
    if not goat:
        raise NotFound("Goat not found")

    reference_no = await allocate_reference(uow, RecordKind.HEALTH)
    record = HealthRecord.create(
        reference_no=reference_no,
        goat_id=payload.goat_id,
        record_type=payload.record_type,
        record_date=payload.record_date,
        description=payload.description,
        medicine=payload.medicine,
        dosage=payload.dosage,
        veterinarian=payload.veterinarian,
        cost=payload.cost,
        next_due_date=payload.next_due_date,
        notes=payload.notes,
        created_by=actor_user_id,
    )
    created = await uow.health_records.add(record)
    await uow.commit()
    return created
