from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.breeding_records import BreedingRecordRepository
from src.domain.models.breeding_record import BreedingRecord
from src.infrastructure.db.orm.breeding_record import BreedingRecordORM


class BreedingRecordsSQLAlchemyRepository(BreedingRecordRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: BreedingRecordORM) -> BreedingRecord:
        return BreedingRecord(
            id=orm.id,
            reference_no=orm.reference_no,
            male_goat_id=orm.male_goat_id,
            female_goat_id=orm.female_goat_id,
            breeding_date=orm.breeding_date,
            method=orm.method,
            expected_kid_date=orm.expected_kid_date,
            actual_kid_date=orm.actual_kid_date,
            kids_born=orm.kids_born,
            notes=orm.notes,
            created_by=orm.created_by,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, record: BreedingRecord) -> BreedingRecord:
        orm = BreedingRecordORM(
            id=record.id,
            reference_no=record.reference_no,
            male_goat_id=record.male_goat_id,
            female_goat_id=record.female_goat_id,
            breeding_date=record.breeding_date,
            method=record.method,
            expected_kid_date=record.expected_kid_date,
            actual_kid_date=record.actual_kid_date,
            kids_born=record.kids_born,
            notes=record.notes,
            created_by=record.created_by,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Breeding reference number already exists") from exc
        return self._to_domain(orm)

    async def get(self, record_id: UUID) -> BreedingRecord | None:
        orm = await self.session.get(BreedingRecordORM, record_id)
        return self._to_domain(orm) if orm else None

    async def list(self, *, goat_id: UUID | None = None) -> list[BreedingRecord]:
        stmt = select(BreedingRecordORM)
        if goat_id is not None:
            stmt = stmt.where(
                or_(
                    BreedingRecordORM.male_goat_id == goat_id,
                    BreedingRecordORM.female_goat_id == goat_id,
                )
            )
        stmt = stmt.order_by(BreedingRecordORM.breeding_date.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_recent(self, limit: int) -> list[BreedingRecord]:
        stmt = (
            select(BreedingRecordORM)
            .order_by(BreedingRecordORM.breeding_date.desc(), BreedingRecordORM.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_upcoming_kidding(self, start: date, end: date) -> list[BreedingRecord]:
        stmt = (
            select(BreedingRecordORM)
            .where(BreedingRecordORM.expected_kid_date >= start)
            .where(BreedingRecordORM.expected_kid_date <= end)
            .where(BreedingRecordORM.actual_kid_date.is_(None))
            .order_by(BreedingRecordORM.expected_kid_date.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
