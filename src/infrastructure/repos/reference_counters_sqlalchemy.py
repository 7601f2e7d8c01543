from __future__ import annotations

import logging

from sqlalchemy import func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import InfrastructureError
from src.application.interfaces.repositories.reference_counters import (
    ReferenceCounterRepository,
)
from src.domain.value_objects.record_kind import RecordKind
from src.infrastructure.db.orm.breeding_record import BreedingRecordORM
from src.infrastructure.db.orm.expense import ExpenseORM
from src.infrastructure.db.orm.health_record import HealthRecordORM
from src.infrastructure.db.orm.inventory_item import InventoryItemORM
from src.infrastructure.db.orm.reference_counter import ReferenceCounterORM
from src.infrastructure.db.orm.sales_record import SalesRecordORM

logger = logging.getLogger(__name__)

_TABLES_BY_KIND = {
    RecordKind.BREEDING: BreedingRecordORM,
    RecordKind.HEALTH: HealthRecordORM,
    RecordKind.EXPENSE: ExpenseORM,
    RecordKind.SALE: SalesRecordORM,
    RecordKind.INVENTORY: InventoryItemORM,
}


class ReferenceCountersSQLAlchemyRepository(ReferenceCounterRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _increment(self, kind: RecordKind) -> int | None:
        stmt = (
            update(ReferenceCounterORM)
            .where(ReferenceCounterORM.kind == kind.value)
            .values(value=ReferenceCounterORM.value + 1)
            .returning(ReferenceCounterORM.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _seed(self, kind: RecordKind) -> int | None:
        table = _TABLES_BY_KIND[kind]
        existing = await self.session.scalar(select(func.count()).select_from(table)) or 0
        value = existing + 1
        try:
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(ReferenceCounterORM).values(kind=kind.value, value=value)
                )
        except IntegrityError:
            logger.info("Reference counter for %s seeded concurrently, retrying", kind.value)
            return None
        return value

    async def next_value(self, kind: RecordKind) -> int:
        value = await self._increment(kind)
        if value is not None:
            return value
        value = await self._seed(kind)
        if value is not None:
            return value
        value = await self._increment(kind)
        if value is None:
            raise InfrastructureError(f"Could not allocate a reference for {kind.value}")
        return value
