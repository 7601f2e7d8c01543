from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.inventory_item import InventoryCategory


class InventoryItemCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    item_name: str = Field(min_length=1, max_length=255)
    category: InventoryCategory
    quantity: Decimal = Field(ge=0)
    unit: str = Field(min_length=1, max_length=32)
    min_stock: Decimal | None = Field(default=None, ge=0)
    unit_price: Decimal | None = Field(default=None, ge=0)
    supplier: str | None = None
    expiry_date: date | None = None
    notes: str | None = None


class InventoryItemUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    version: int | None = None
    item_name: str | None = Field(default=None, min_length=1, max_length=255)
    category: InventoryCategory | None = None
    quantity: Decimal | None = Field(default=None, ge=0)
    unit: str | None = Field(default=None, min_length=1, max_length=32)
    min_stock: Decimal | None = Field(default=None, ge=0)
    unit_price: Decimal | None = Field(default=None, ge=0)
    supplier: str | None = None
    expiry_date: date | None = None
    notes: str | None = None


class InventoryItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    reference_no: str
    item_name: str
    category: str
    quantity: Decimal
    unit: str
    min_stock: Decimal
    unit_price: Decimal | None = None
    supplier: str | None = None
    expiry_date: date | None = None
    notes: str | None = None
    is_low_stock: bool
    created_by: UUID | None = None
    created_at: datetime
    updated_at: datetime
    version: int
