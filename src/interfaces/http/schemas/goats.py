from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domain.value_objects.goat_status import Gender, GoatPurpose, GoatSource, GoatStatus
from src.interfaces.http.schemas.breeding import BreedingRecordResponse
from src.interfaces.http.schemas.health_records import HealthRecordResponse


class GoatBase(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    tag_no: str = Field(min_length=1, max_length=50)
    breed: str = Field(min_length=1, max_length=100)
    gender: Gender
    name: str | None = None
    birth_date: date | None = None
    weight: Decimal | None = Field(default=None, ge=0)
    purpose: GoatPurpose | None = None
    source: GoatSource | None = None
    purchase_price: Decimal | None = Field(default=None, ge=0)
    purchase_date: date | None = None
    notes: str | None = None

    # Genealogy fields
    sire_id: UUID | None = None
    dam_id: UUID | None = None

    @field_validator("tag_no", "breed")
    @classmethod
    def strip_text(cls, v: str) -> str:
        value = v.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class GoatCreate(GoatBase):
    status: GoatStatus | None = None


class GoatUpdate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    version: int | None = None
    tag_no: str | None = Field(default=None, min_length=1, max_length=50)
    breed: str | None = Field(default=None, min_length=1, max_length=100)
    gender: Gender | None = None
    name: str | None = None
    birth_date: date | None = None
    status: GoatStatus | None = None
    weight: Decimal | None = Field(default=None, ge=0)
    purpose: GoatPurpose | None = None
    source: GoatSource | None = None
    purchase_price: Decimal | None = Field(default=None, ge=0)
    purchase_date: date | None = None
    notes: str | None = None
    sire_id: UUID | None = None
    dam_id: UUID | None = None


class GoatSummary(BaseModel):
    """Compact goat reference embedded in other records."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tag_no: str
    name: str | None = None
    breed: str
    gender: str
    status: str


class GoatResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tag_no: str
    breed: str
    gender: str
    name: str | None = None
    birth_date: date | None = None
    status: str
    weight: Decimal | None = None
    purpose: str | None = None
    source: str | None = None
    purchase_price: Decimal | None = None
    purchase_date: date | None = None
    notes: str | None = None
    sire_id: UUID | None = None
    dam_id: UUID | None = None
    created_by: UUID | None = None
    updated_by: UUID | None = None
    created_at: datetime
    updated_at: datetime
    version: int


class WeightRecordCreate(BaseModel):
    recorded_on: date
    weight: Decimal = Field(gt=0)
    notes: str | None = None


class WeightRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    goat_id: UUID
    recorded_on: date
    weight: Decimal
    notes: str | None = None
    created_by: UUID | None = None
    created_at: datetime


class GoatDetailResponse(GoatResponse):
    sire: GoatSummary | None = None
    dam: GoatSummary | None = None
    offspring: list[GoatSummary] = Field(default_factory=list)
    health_records: list[HealthRecordResponse] = Field(default_factory=list)
    weight_records: list[WeightRecordResponse] = Field(default_factory=list)
    breeding_records: list[BreedingRecordResponse] = Field(default_factory=list)
