from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import ConflictError, NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.inventory_item import InventoryItem
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class UpdateInventoryItemInput:
    version: int | None = None
    item_name: str | None = None
    category: str | None = None
    quantity: Decimal | None = None
    unit: str | None = None
    min_stock: Decimal | None = None
    unit_price: Decimal | None = None
    supplier: str | None = None
    expiry_date: date | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    item_id: UUID,
    payload: UpdateInventoryItemInput,
) -> InventoryItem:
    if not role.can_update():
        raise PermissionDenied("Role not allowed to update inventory items")
    existing = await uow.inventory.get(item_id)
    if not existing:
        raise NotFound("Inventory item not found")
    data: dict = {}
    for field_name in (
        "item_name",
        "category",
        "quantity",
        "unit",
        "min_stock",
        "unit_price",
        "supplier",
        "expiry_date",
        "notes",
    ):
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if not data:
        return existing
    for field_name in ("quantity", "min_stock"):
        if field_name in data and data[field_name] < 0:
            raise ValidationError(f"{field_name} cannot be negative")
    expected_version = payload.version if payload.version is not None else existing.version
    updated = await uow.inventory.update(item_id, data, expected_version=expected_version)
    if not updated:
        raise ConflictError("Version mismatch while updating inventory item")
    await uow.commit()
    return updated
