from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.health_records import HealthRecordRepository
from src.domain.models.health_record import HealthRecord
from src.infrastructure.db.orm.health_record import HealthRecordORM


class HealthRecordsSQLAlchemyRepository(HealthRecordRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: HealthRecordORM) -> HealthRecord:
        return HealthRecord(
            id=orm.id,
            reference_no=orm.reference_no,
            goat_id=orm.goat_id,
            record_type=orm.record_type,
            record_date=orm.record_date,
            description=orm.description,
            medicine=orm.medicine,
            dosage=orm.dosage,
            veterinarian=orm.veterinarian,
            cost=orm.cost,
            next_due_date=orm.next_due_date,
            notes=orm.notes,
            created_by=orm.created_by,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, record: HealthRecord) -> HealthRecord:
        orm = HealthRecordORM(
            id=record.id,
            reference_no=record.reference_no,
            goat_id=record.goat_id,
            record_type=record.record_type,
            record_date=record.record_date,
            description=record.description,
            medicine=record.medicine,
            dosage=record.dosage,
            veterinarian=record.veterinarian,
            cost=record.cost,
            next_due_date=record.next_due_date,
            notes=record.notes,
            created_by=record.created_by,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Health reference number already exists") from exc
        return self._to_domain(orm)

    async def get(self, record_id: UUID) -> HealthRecord | None:
        orm = await self.session.get(HealthRecordORM, record_id)
        return self._to_domain(orm) if orm else None

    async def list(
        self, *, goat_id: UUID | None = None, record_type: str | None = None
    ) -> list[HealthRecord]:
        stmt = select(HealthRecordORM)
        if goat_id is not None:
            stmt = stmt.where(HealthRecordORM.goat_id == goat_id)
        if record_type:
            stmt = stmt.where(HealthRecordORM.record_type == record_type)
        stmt = stmt.order_by(HealthRecordORM.record_date.desc(), HealthRecordORM.created_at.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_due(self, start: date, end: date) -> list[HealthRecord]:
        stmt = (
            select(HealthRecordORM)
            .where(HealthRecordORM.next_due_date >= start)
            .where(HealthRecordORM.next_due_date <= end)
            .order_by(HealthRecordORM.next_due_date.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
