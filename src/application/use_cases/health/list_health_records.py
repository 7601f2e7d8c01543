from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.health_record import HealthRecord


async def execute(
    uow: UnitOfWork,
    *,
    goat_id: UUID | None = None,
    record_type: str | None = None,
) -> list[HealthRecord]:
    return await uow.health_records.list(goat_id=goat_id, record_type=record_type)
