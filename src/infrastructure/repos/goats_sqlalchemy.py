from __future__ import annotations

from typing import Iterable
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.goats import GoatRepository
from src.domain.models.goat import Goat
from src.infrastructure.db.orm.goat import GoatORM


class GoatsSQLAlchemyRepository(GoatRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: GoatORM) -> Goat:
        return Goat(
            id=orm.id,
            tag_no=orm.tag_no,
            breed=orm.breed,
            gender=orm.gender,
            name=orm.name,
            birth_date=orm.birth_date,
            status=orm.status,
            weight=orm.weight,
            purpose=orm.purpose,
            source=orm.source,
            purchase_price=orm.purchase_price,
            purchase_date=orm.purchase_date,
            notes=orm.notes,
            sire_id=orm.sire_id,
            dam_id=orm.dam_id,
            created_by=orm.created_by,
            updated_by=orm.updated_by,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, goat: Goat) -> Goat:
        orm = GoatORM(
            id=goat.id,
            tag_no=goat.tag_no,
            breed=goat.breed,
            gender=goat.gender,
            name=goat.name,
            birth_date=goat.birth_date,
            status=goat.status,
            weight=goat.weight,
            purpose=goat.purpose,
            source=goat.source,
            purchase_price=goat.purchase_price,
            purchase_date=goat.purchase_date,
            notes=goat.notes,
            sire_id=goat.sire_id,
            dam_id=goat.dam_id,
            created_by=goat.created_by,
            updated_by=goat.updated_by,
            created_at=goat.created_at,
            updated_at=goat.updated_at,
            version=goat.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Goat tag number already exists") from exc
        return self._to_domain(orm)

    async def get(self, goat_id: UUID) -> Goat | None:
        stmt = select(GoatORM).where(GoatORM.id == goat_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_many(self, goat_ids: Iterable[UUID]) -> dict[UUID, Goat]:
        ids = {goat_id for goat_id in goat_ids if goat_id is not None}
        if not ids:
            return {}
        stmt = select(GoatORM).where(GoatORM.id.in_(ids))
        result = await self.session.execute(stmt)
        return {orm.id: self._to_domain(orm) for orm in result.scalars().all()}

    async def list(
        self,
        *,
        status: str | None = None,
        breed: str | None = None,
        gender: str | None = None,
    ) -> list[Goat]:
        stmt = select(GoatORM)
        if status:
            stmt = stmt.where(GoatORM.status == status)
        if breed:
            stmt = stmt.where(GoatORM.breed == breed)
        if gender:
            stmt = stmt.where(GoatORM.gender == gender)
        stmt = stmt.order_by(GoatORM.created_at.desc(), GoatORM.tag_no)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_offspring(self, goat_id: UUID) -> list[Goat]:
        stmt = (
            select(GoatORM)
            .where((GoatORM.sire_id == goat_id) | (GoatORM.dam_id == goat_id))
            .order_by(GoatORM.birth_date.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(
        self,
        goat_id: UUID,
        data: dict,
        expected_version: int | None = None,
    ) -> Goat | None:
        stmt = update(GoatORM).where(GoatORM.id == goat_id)
        if expected_version is not None:
            stmt = stmt.where(GoatORM.version == expected_version)
        stmt = stmt.values(**data, version=GoatORM.version + 1).returning(GoatORM)
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update goat due to constraint violation") from exc
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)

    async def set_status(
        self, goat_id: UUID, status: str, *, expected_status: str | None = None
    ) -> bool:
        stmt = update(GoatORM).where(GoatORM.id == goat_id)
        if expected_status is not None:
            stmt = stmt.where(GoatORM.status == expected_status)
        stmt = stmt.values(status=status, version=GoatORM.version + 1).returning(GoatORM.id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def delete(self, goat_id: UUID) -> bool:
        stmt = delete(GoatORM).where(GoatORM.id == goat_id).returning(GoatORM.id)
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Goat has sales history and cannot be deleted") from exc
        return result.scalar_one_or_none() is not None

    async def count(self, *, status: str | None = None, gender: str | None = None) -> int:
        stmt = select(func.count(GoatORM.id))
        if status:
            stmt = stmt.where(GoatORM.status == status)
        if gender:
            stmt = stmt.where(GoatORM.gender == gender)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_status(self) -> dict[str, int]:
        stmt = select(GoatORM.status, func.count(GoatORM.id)).group_by(GoatORM.status)
        result = await self.session.execute(stmt)
        return {status: count for status, count in result.all()}

    async def breed_distribution(self, *, status: str) -> list[tuple[str, int]]:
        stmt = (
            select(GoatORM.breed, func.count(GoatORM.id))
            .where(GoatORM.status == status)
            .group_by(GoatORM.breed)
            .order_by(func.count(GoatORM.id).desc(), GoatORM.breed)
        )
        result = await self.session.execute(stmt)
        return [(breed, count) for breed, count in result.all()]
