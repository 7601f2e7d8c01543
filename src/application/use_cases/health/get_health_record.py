from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.health_record import HealthRecord


async def execute(uow: UnitOfWork, record_id: UUID) -> HealthRecord:
    record = await uow.health_records.get(record_id)
    if not record:
        raise NotFound("Health record not found")
    return record
