from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.inventory_item import InventoryItem


class InventoryRepository(Protocol):
    async def add(self, item: InventoryItem) -> InventoryItem: ...

    async def get(self, item_id: UUID) -> InventoryItem | None: ...

    async def list(self, *, category: str | None = None) -> list[InventoryItem]: ...

    async def update(
        self, item_id: UUID, data: dict, expected_version: int
    ) -> InventoryItem | None: ...

    async def list_low_stock(self) -> list[InventoryItem]: ...
