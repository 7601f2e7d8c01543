from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class ExpenseCategory(str, Enum):
    FEED = "Feed"
    MEDICINE = "Medicine"
    VETERINARY = "Veterinary"
    LABOUR = "Labour"
    EQUIPMENT = "Equipment"
    UTILITIES = "Utilities"
    TRANSPORT = "Transport"
    OTHER = "Other"


@dataclass(slots=True)
class Expense:
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
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        reference_no: str,
        expense_date: date,
        category: str,
        amount: Decimal,
        description: str | None = None,
        payment_mode: str | None = None,
        vendor: str | None = None,
        notes: str | None = None,
        created_by: UUID | None = None,
    ) -> Expense:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            reference_no=reference_no,
            expense_date=expense_date,
            category=category,
            amount=amount,
            description=description,
            payment_mode=payment_mode,
            vendor=vendor,
            notes=notes,
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )
