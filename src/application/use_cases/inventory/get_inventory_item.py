from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.inventory_item import InventoryItem


async def execute(uow: UnitOfWork, item_id: UUID) -> InventoryItem:
    item = await uow.inventory.get(item_id)
    if not item:
        raise NotFound("Inventory item not found")
    return item
