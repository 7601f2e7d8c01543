from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.sales_record import SalesRecord


async def execute(uow: UnitOfWork, sale_id: UUID) -> SalesRecord:
    record = await uow.sales_records.get(sale_id)
    if not record:
        raise NotFound("Sale not found")
    return record
