from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.sales_record import PaymentStatus, SaleType
from src.interfaces.http.schemas.goats import GoatSummary


class SaleCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    goat_id: UUID
    sale_date: date
    sale_price: Decimal = Field(ge=0)
    buyer_name: str | None = None
    buyer_contact: str | None = None
    sale_type: SaleType | None = None
    weight_at_sale: Decimal | None = Field(default=None, gt=0)
    payment_status: PaymentStatus | None = None
    notes: str | None = None


class SaleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    reference_no: str
    goat_id: UUID
    sale_date: date
    sale_price: Decimal
    buyer_name: str | None = None
    buyer_contact: str | None = None
    sale_type: str
    weight_at_sale: Decimal | None = None
    payment_status: str
    notes: str | None = None
    created_by: UUID | None = None
    created_at: datetime
    goat: GoatSummary | None = None
