from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breeding_record import BreedingRecord


async def execute(uow: UnitOfWork, record_id: UUID) -> BreedingRecord:
    record = await uow.breeding_records.get(record_id)
    if not record:
        raise NotFound("Breeding record not found")
    return record
