from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.inventory_item import InventoryItem


async def execute(uow: UnitOfWork, *, category: str | None = None) -> list[InventoryItem]:
    return await uow.inventory.list(category=category)
