from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class SaleType(str, Enum):
    LIVE = "Live"
    MEAT = "Meat"
    BREEDING = "Breeding"


class PaymentStatus(str, Enum):
    PAID = "Paid"
    PENDING = "Pending"
    PARTIAL = "Partial"


@dataclass(slots=True)
class SalesRecord:
    id: UUID
    reference_no: str
    goat_id: UUID
    sale_date: date
    sale_price: Decimal
    buyer_name: str | None = None
    buyer_contact: str | None = None
    sale_type: str = SaleType.LIVE.value
    weight_at_sale: Decimal | None = None
    payment_status: str = PaymentStatus.PAID.value
    notes: str | None = None

    created_by: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        reference_no: str,
        goat_id: UUID,
        sale_date: date,
        sale_price: Decimal,
        buyer_name: str | None = None,
        buyer_contact: str | None = None,
        sale_type: str | None = None,
        weight_at_sale: Decimal | None = None,
        payment_status: str | None = None,
        notes: str | None = None,
        created_by: UUID | None = None,
    ) -> SalesRecord:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            reference_no=reference_no,
            goat_id=goat_id,
            sale_date=sale_date,
            sale_price=sale_price,
            buyer_name=buyer_name,
            buyer_contact=buyer_contact,
            sale_type=sale_type or SaleType.LIVE.value,
            weight_at_sale=weight_at_sale,
            payment_status=payment_status or PaymentStatus.PAID.value,
            notes=notes,
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )
