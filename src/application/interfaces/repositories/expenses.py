from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from src.domain.models.expense import Expense


class ExpenseRepository(Protocol):
    async def add(self, expense: Expense) -> Expense: ...

    async def get(self, expense_id: UUID) -> Expense | None: ...

    async def list(
        self,
        *,
        category: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[Expense]: ...

    async def total_between(self, date_from: date, date_to: date) -> Decimal: ...

    async def totals_by_category(
        self, date_from: date, date_to: date
    ) -> list[tuple[str, Decimal]]: ...
