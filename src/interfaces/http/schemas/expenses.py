from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.expense import ExpenseCategory


class ExpenseCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    expense_date: date
    category: ExpenseCategory
    amount: Decimal = Field(gt=0)
    description: str | None = None
    payment_mode: str | None = None
    vendor: str | None = None
    notes: str | None = None


class ExpenseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    reference_no: str
    expense_date: date
    category: str
    amount: Decimal
    description: str | None = None
    payment_mode: str | None = None
    vendor: str | None = None
    notes: str | None = None
    created_by: UUID | None = None
    created_at: datetime
