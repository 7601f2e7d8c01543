from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.expenses import ExpenseRepository
from src.domain.models.expense import Expense
from src.infrastructure.db.orm.expense import ExpenseORM


def _as_decimal(value) -> Decimal:
    return Decimal(str(value)) if value is not None else Decimal("0")


class ExpensesSQLAlchemyRepository(ExpenseRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ExpenseORM) -> Expense:
        return Expense(
            id=orm.id,
            reference_no=orm.reference_no,
            expense_date=orm.expense_date,
            category=orm.category,
            amount=orm.amount,
            description=orm.description,
            payment_mode=orm.payment_mode,
            vendor=orm.vendor,
            notes=orm.notes,
            created_by=orm.created_by,
            created_at=orm.created_at,
            updated_at=orm.updated_at,
        )

    async def add(self, expense: Expense) -> Expense:
        orm = ExpenseORM(
            id=expense.id,
            reference_no=expense.reference_no,
            expense_date=expense.expense_date,
            category=expense.category,
            amount=expense.amount,
            description=expense.description,
            payment_mode=expense.payment_mode,
            vendor=expense.vendor,
            notes=expense.notes,
            created_by=expense.created_by,
            created_at=expense.created_at,
            updated_at=expense.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Expense reference number already exists") from exc
        return self._to_domain(orm)

    async def get(self, expense_id: UUID) -> Expense | None:
        orm = await self.session.get(ExpenseORM, expense_id)
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        category: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[Expense]:
        stmt = select(ExpenseORM)
        if category:
            stmt = stmt.where(ExpenseORM.category == category)
        if date_from is not None:
            stmt = stmt.where(ExpenseORM.expense_date >= date_from)
        if date_to is not None:
            stmt = stmt.where(ExpenseORM.expense_date <= date_to)
        stmt = stmt.order_by(ExpenseORM.expense_date.desc(), ExpenseORM.created_at.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def total_between(self, date_from: date, date_to: date) -> Decimal:
        stmt = (
            select(func.sum(ExpenseORM.amount))
            .where(ExpenseORM.expense_date >= date_from)
            .where(ExpenseORM.expense_date <= date_to)
        )
        result = await self.session.execute(stmt)
        return _as_decimal(result.scalar())

    async def totals_by_category(
        self, date_from: date, date_to: date
    ) -> list[tuple[str, Decimal]]:
        stmt = (
            select(ExpenseORM.category, func.sum(ExpenseORM.amount))
            .where(ExpenseORM.expense_date >= date_from)
            .where(ExpenseORM.expense_date <= date_to)
            .group_by(ExpenseORM.category)
            .order_by(ExpenseORM.category)
        )
        result = await self.session.execute(stmt)
        return [(category, _as_decimal(total)) for category, total in result.all()]
