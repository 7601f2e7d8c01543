from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breeding_record import BreedingRecord


async def execute(uow: UnitOfWork, *, goat_id: UUID | None = None) -> list[BreedingRecord]:
    return await uow.breeding_records.list(goat_id=goat_id)
