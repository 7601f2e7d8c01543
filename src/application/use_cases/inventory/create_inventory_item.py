from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.reference_registrar import allocate_reference
from src.domain.models.inventory_item import InventoryItem
from src.domain.value_objects.record_kind import RecordKind
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class CreateInventoryItemInput:
    item_name: str
    category: str
    quantity: Decimal
    unit: str
    min_stock: Decimal | None = None
    unit_price: Decimal | None = None
    supplier: str | None = None
    expiry_date: date | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    payload: CreateInventoryItemInput,
) -> InventoryItem:
    if not role.can_create():
        raise PermissionDenied("Role not allowed to create inventory items")
    if payload.quantity < 0:
        raise ValidationError("Quantity cannot be negative")
    if payload.min_stock is not None and payload.min_stock < 0:
        raise ValidationError("Minimum stock cannot be negative")

    reference_no = await allocate_reference(uow, RecordKind.INVENTORY)
    item = InventoryItem.create(
        reference_no=reference_no,
        item_name=payload.item_name,
        category=payload.category,
        quantity=payload.quantity,
        unit=payload.unit,
        min_stock=payload.min_stock,
        unit_price=payload.unit_price,
        supplier=payload.supplier,
        expiry_date=payload.expiry_date,
        notes=payload.notes,
        created_by=actor_user_id,
    )
    created = await uow.inventory.add(item)
    await uow.commit()
    return created
