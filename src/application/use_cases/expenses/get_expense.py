from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.expense import Expense


async def execute(uow: UnitOfWork, expense_id: UUID) -> Expense:
    expense = await uow.expenses.get(expense_id)
    if not expense:
        raise NotFound("Expense not found")
    return expense
