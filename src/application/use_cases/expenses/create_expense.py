from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.reference_registrar import allocate_reference
from src.domain.models.expense import Expense
from src.domain.value_objects.record_kind import RecordKind
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class CreateExpenseInput:
    expense_date: date
    category: str
    amount: Decimal
    description: str | None = None
    payment_mode: str | None = None
    vendor: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    payload: CreateExpenseInput,
) -> Expense:
    if not role.can_create():
        raise PermissionDenied("Role not allowed to record expenses")
    if payload.amount <= 0:
        raise ValidationError("Amount must be positive")

    reference_no = await allocate_reference(uow, RecordKind.EXPENSE)
    expense = Expense.create(
        reference_no=reference_no,
        expense_date=payload.expense_date,
        category=payload.category,
        amount=payload.amount,
        description=payload.description,
        payment_mode=payload.payment_mode,
        vendor=payload.vendor,
        notes=payload.notes,
        created_by=actor_user_id,
    )
    created = await uow.expenses.add(expense)
    await uow.commit()
    return created
