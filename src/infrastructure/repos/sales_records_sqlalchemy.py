from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.sales_records import SalesRecordRepository
from src.domain.models.sales_record import SalesRecord
from src.infrastructure.db.orm.sales_record import SalesRecordORM


def _as_decimal(value) -> Decimal:
    return Decimal(str(value)) if value is not None else Decimal("0")


class SalesRecordsSQLAlchemyRepository(SalesRecordRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: SalesRecordORM) -> SalesRecord:
        return SalesRecord(
            id=orm.id,
            reference_no=orm.reference_no,
            goat_id=orm.goat_id,
            sale_date=orm.sale_date,
            sale_price=orm.sale_price,
            buyer_name=orm.buyer_name,
            buyer_contact=orm.buyer_contact,
            sale_type=orm.sale_type,
            weight_at_sale=orm.weight_at_sale,
            payment_status=orm.payment_status,
            notes=orm.notes,
            created_by=orm.created_by,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, record: SalesRecord) -> SalesRecord:
        orm = SalesRecordORM(
            id=record.id,
            reference_no=record.reference_no,
            goat_id=record.goat_id,
            sale_date=record.sale_date,
            sale_price=record.sale_price,
            buyer_name=record.buyer_name,
            buyer_contact=record.buyer_contact,
            sale_type=record.sale_type,
            weight_at_sale=record.weight_at_sale,
            payment_status=record.payment_status,
            notes=record.notes,
            created_by=record.created_by,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Sale reference number already exists") from exc
        return self._to_domain(orm)

    async def get(self, record_id: UUID) -> SalesRecord | None:
        orm = await self.session.get(SalesRecordORM, record_id)
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        goat_id: UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[SalesRecord]:
        stmt = select(SalesRecordORM)
        if goat_id is not None:
            stmt = stmt.where(SalesRecordORM.goat_id == goat_id)
        if date_from is not None:
            stmt = stmt.where(SalesRecordORM.sale_date >= date_from)
        if date_to is not None:
            stmt = stmt.where(SalesRecordORM.sale_date <= date_to)
        stmt = stmt.order_by(SalesRecordORM.sale_date.desc(), SalesRecordORM.created_at.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def total_between(self, date_from: date, date_to: date) -> Decimal:
        stmt = (
            select(func.sum(SalesRecordORM.sale_price))
            .where(SalesRecordORM.sale_date >= date_from)
            .where(SalesRecordORM.sale_date <= date_to)
        )
        result = await self.session.execute(stmt)
        return _as_decimal(result.scalar())

    async def totals_by_type(self, date_from: date, date_to: date) -> list[tuple[str, Decimal]]:
        stmt = (
            select(SalesRecordORM.sale_type, func.sum(SalesRecordORM.sale_price))
            .where(SalesRecordORM.sale_date >= date_from)
            .where(SalesRecordORM.sale_date <= date_to)
            .group_by(SalesRecordORM.sale_type)
            .order_by(SalesRecordORM.sale_type)
        )
        result = await self.session.execute(stmt)
        return [(sale_type, _as_decimal(total)) for sale_type, total in result.all()]
