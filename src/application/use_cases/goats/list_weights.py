from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.weight_record import WeightRecord


async def execute(uow: UnitOfWork, goat_id: UUID) -> list[WeightRecord]:
    goat = await uow.goats.get(goat_id)
    if not goat:
        raise NotFound("Goat not found")
    return await uow.weight_records.list_by_goat(goat_id)
