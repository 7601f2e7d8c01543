from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.breeding_records import BreedingRecordRepository
from src.application.interfaces.repositories.expenses import ExpenseRepository
from src.application.interfaces.repositories.goats import GoatRepository
from src.application.interfaces.repositories.health_records import HealthRecordRepository
from src.application.interfaces.repositories.inventory_items import InventoryRepository
from src.application.interfaces.repositories.reference_counters import (
    ReferenceCounterRepository,
)
from src.application.interfaces.repositories.sales_records import SalesRecordRepository
from src.application.interfaces.repositories.users import UserRepository
from src.application.interfaces.repositories.weight_records import WeightRecordRepository


class UnitOfWork(Protocol):
    goats: GoatRepository
    breeding_records: BreedingRecordRepository
    health_records: HealthRecordRepository
    weight_records: WeightRecordRepository
    expenses: ExpenseRepository
    sales_records: SalesRecordRepository
    inventory: InventoryRepository
    users: UserRepository
    reference_counters: ReferenceCounterRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
