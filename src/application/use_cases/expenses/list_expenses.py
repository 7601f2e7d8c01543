from __future__ import annotations

from datetime import date

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.expense import Expense


async def execute(
    uow: UnitOfWork,
    *,
    category: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[Expense]:
    # The date filter applies only when both ends are given
    if start_date is None or end_date is None:
        start_date = end_date = None
    elif start_date > end_date:
        raise ValidationError("startDate must be on or before endDate")
    return await uow.expenses.list(category=category, date_from=start_date, date_to=end_date)
