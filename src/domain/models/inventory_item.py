from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class InventoryCategory(str, Enum):
    FEED = "Feed"
    MEDICINE = "Medicine"
    VACCINE = "Vaccine"
    EQUIPMENT = "Equipment"
    SUPPLEMENT = "Supplement"
    OTHER = "Other"


@dataclass(slots=True)
class InventoryItem:
    id: UUID
    reference_no: str
    item_name: str
    category: str
    quantity: Decimal
    unit: str
    min_stock: Decimal = Decimal("0")
    unit_price: Decimal | None = None
    supplier: str | None = None
    expiry_date: date | None = None
    notes: str | None = None

    created_by: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        reference_no: str,
        item_name: str,
        category: str,
        quantity: Decimal,
        unit: str,
        min_stock: Decimal | None = None,
        unit_price: Decimal | None = None,
        supplier: str | None = None,
        expiry_date: date | None = None,
        notes: str | None = None,
        created_by: UUID | None = None,
    ) -> InventoryItem:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            reference_no=reference_no,
            item_name=item_name,
            category=category,
            quantity=quantity,
            unit=unit,
            min_stock=min_stock if min_stock is not None else Decimal("0"),
            unit_price=unit_price,
            supplier=supplier,
            expiry_date=expiry_date,
            notes=notes,
            created_by=created_by,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def is_low_stock(self) -> bool:
        return self.quantity <= self.min_stock
