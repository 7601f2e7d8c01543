from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.health_record import HealthRecordType


class HealthGoatRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tag_no: str
    name: str | None = None


class HealthRecordCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    goat_id: UUID
    record_type: HealthRecordType
    record_date: date
    description: str | None = None
    medicine: str | None = None
    dosage: str | None = None
    veterinarian: str | None = None
    cost: Decimal | None = Field(default=None, ge=0)
    next_due_date: date | None = None
    notes: str | None = None


class HealthRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    reference_no: str
    goat_id: UUID
    record_type: str
    record_date: date
    description: str | None = None
    medicine: str | None = None
    dosage: str | None = None
    veterinarian: str | None = None
    cost: Decimal | None = None
    next_due_date: date | None = None
    notes: str | None = None
    created_by: UUID | None = None
    created_at: datetime
    goat: HealthGoatRef | None = None
