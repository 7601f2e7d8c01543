from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.breeding_record import BreedingMethod


class BreedingGoatRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    tag_no: str
    name: str | None = None


class BreedingRecordCreate(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    male_goat_id: UUID
    female_goat_id: UUID
    breeding_date: date
    method: BreedingMethod | None = None
    expected_kid_date: date | None = None
    actual_kid_date: date | None = None
    kids_born: int | None = Field(default=None, ge=0)
    notes: str | None = None


class BreedingRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    reference_no: str
    male_goat_id: UUID
    female_goat_id: UUID
    breeding_date: date
    method: str
    expected_kid_date: date | None = None
    actual_kid_date: date | None = None
    kids_born: int | None = None
    notes: str | None = None
    created_by: UUID | None = None
    created_at: datetime
    # Filled in by list endpoints
    male_goat: BreedingGoatRef | None = None
    female_goat: BreedingGoatRef | None = None
