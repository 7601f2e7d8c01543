from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.weight_records import WeightRecordRepository
from src.domain.models.weight_record import WeightRecord
from src.infrastructure.db.orm.weight_record import WeightRecordORM


class WeightRecordsSQLAlchemyRepository(WeightRecordRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: WeightRecordORM) -> WeightRecord:
        return WeightRecord(
            id=orm.id,
            goat_id=orm.goat_id,
            recorded_on=orm.recorded_on,
            weight=orm.weight,
            notes=orm.notes,
            created_by=orm.created_by,
            created_at=orm.created_at,
        )

    async def add(self, record: WeightRecord) -> WeightRecord:
        orm = WeightRecordORM(
            id=record.id,
            goat_id=record.goat_id,
            recorded_on=record.recorded_on,
            weight=record.weight,
            notes=record.notes,
            created_by=record.created_by,
            created_at=record.created_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def list_by_goat(self, goat_id: UUID) -> list[WeightRecord]:
        stmt = (
            select(WeightRecordORM)
            .where(WeightRecordORM.goat_id == goat_id)
            .order_by(WeightRecordORM.recorded_on.desc(), WeightRecordORM.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
