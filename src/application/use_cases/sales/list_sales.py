from __future__ import annotations

from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.sales_record import SalesRecord


async def execute(uow: UnitOfWork, *, goat_id: UUID | None = None) -> list[SalesRecord]:
    return await uow.sales_records.list(goat_id=goat_id)
