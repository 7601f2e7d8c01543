from __future__ import annotations

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.expenses import create_expense, get_expense, list_expenses
from src.domain.models.expense import ExpenseCategory
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.expenses import ExpenseCreate, ExpenseResponse

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.get("", response_model=list[ExpenseResponse])
async def list_expenses_endpoint(
    category: ExpenseCategory | None = Query(None),
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[ExpenseResponse]:
    expenses = await list_expenses.execute(
        uow,
        category=category.value if category else None,
        start_date=start_date,
        end_date=end_date,
    )
    return [ExpenseResponse.model_validate(e) for e in expenses]


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense_endpoint(
    payload: ExpenseCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ExpenseResponse:
    expense = await create_expense.execute(
        uow,
        context.role,
        context.user_id,
        create_expense.CreateExpenseInput(**payload.model_dump()),
    )
    return ExpenseResponse.model_validate(expense)


@router.get("/{expense_id}", response_model=ExpenseResponse)
async def get_expense_endpoint(
    expense_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ExpenseResponse:
    expense = await get_expense.execute(uow, expense_id)
    return ExpenseResponse.model_validate(expense)
