from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.weight_record import WeightRecord
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class RecordWeightInput:
    recorded_on: date
    weight: Decimal
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    goat_id: UUID,
    payload: RecordWeightInput,
) -> WeightRecord:
    """Log a weighing and carry it onto the goat as its current weight."""
    if not role.can_create():
        raise PermissionDenied("Role not allowed to record weights")
    if payload.weight <= 0:
        raise ValidationError("Weight must be positive")
    goat = await uow.goats.get(goat_id)
    if not goat:
        raise NotFound("Goat not found")
    record = WeightRecord.create(
        goat_id=goat_id,
        recorded_on=payload.recorded_on,
        weight=payload.weight,
        notes=payload.notes,
        created_by=actor_user_id,
    )
    created = await uow.weight_records.add(record)
    latest = await uow.weight_records.list_by_goat(goat_id)
    if latest and latest[0].id == created.id:
        await uow.goats.update(goat_id, {"weight": payload.weight, "updated_by": actor_user_id})
    await uow.commit()
    return created
