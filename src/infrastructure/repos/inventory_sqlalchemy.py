from __future__ import annotations

from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.inventory_items import InventoryRepository
from src.domain.models.inventory_item import InventoryItem
from src.infrastructure.db.orm.inventory_item import InventoryItemORM


class InventorySQLAlchemyRepository(InventoryRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: InventoryItemORM) -> InventoryItem:
        return InventoryItem(
            id=orm.id,
            reference_no=orm.reference_no,
            item_name=orm.item_name,
            category=orm.category,
            quantity=orm.quantity,
            unit=orm.unit,
            min_stock=orm.min_stock,
            unit_price=orm.unit_price,
            supplier=orm.supplier,
            expiry_date=orm.expiry_date,
            notes=orm.notes,
            created_by=orm.created_by,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
            version=orm.version,
        )

    async def add(self, item: InventoryItem) -> InventoryItem:
        orm = InventoryItemORM(
            id=item.id,
            reference_no=item.reference_no,
            item_name=item.item_name,
            category=item.category,
            quantity=item.quantity,
            unit=item.unit,
            min_stock=item.min_stock,
            unit_price=item.unit_price,
            supplier=item.supplier,
            expiry_date=item.expiry_date,
            notes=item.notes,
            created_by=item.created_by,
            created_at=item.created_at,
            updated_at=item.updated_at,
            version=item.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Inventory reference number already exists") from exc
        return self._to_domain(orm)

    async def get(self, item_id: UUID) -> InventoryItem | None:
        orm = await self.session.get(InventoryItemORM, item_id)
        return self._to_domain(orm) if orm else None

    async def list(self, *, category: str | None = None) -> list[InventoryItem]:
        stmt = select(InventoryItemORM)
        if category:
            stmt = stmt.where(InventoryItemORM.category == category)
        stmt = stmt.order_by(InventoryItemORM.item_name.asc())
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(
        self, item_id: UUID, data: dict, expected_version: int
    ) -> InventoryItem | None:
        stmt = (
            update(InventoryItemORM)
            .where(InventoryItemORM.id == item_id)
            .where(InventoryItemORM.version == expected_version)
            .values(**data, version=expected_version + 1)
            .returning(InventoryItemORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)

    async def list_low_stock(self) -> list[InventoryItem]:
        stmt = (
            select(InventoryItemORM)
            .where(InventoryItemORM.quantity <= InventoryItemORM.min_stock)
            .order_by(InventoryItemORM.quantity.asc(), InventoryItemORM.item_name.asc())
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]
