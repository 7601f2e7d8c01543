from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from uuid import UUID, uuid4


class BreedingMethod(str, Enum):
    NATURAL = "Natural"
    AI = "AI"


@dataclass(slots=True)
class BreedingRecord:
    id: UUID
    reference_no: str
    male_goat_id: UUID
    female_goat_id: UUID
    breeding_date: date
    method: str = BreedingMethod.NATURAL.value
    expected_kid_date: date | None = None
    actual_kid_date: date | None = None
    kids_born: int | None = None
    notes: str | None = None

    created_by: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        reference_no: str,
        male_goat_id: UUID,
        female_goat_id: UUID,
        breeding_date: date,
        *,
        gestation_days: int,
        method: str | None = None,
        expected_kid_date: date | None = None,
        actual_kid_date: date | None = None,
        kids_born: int | None = None,
        notes: str | None = None,
        created_by: UUID | None = None,
    ) -> BreedingRecord:
        now = datetime.now(timezone.utc)
        if expected_kid_date is None:
            expected_kid_date = breeding_date + timedelta(days=gestation_days)
        return cls(
            id=uuid4(),
            reference_no=reference_no,
            male_goat_id=male_goat_id,
            female_goat_id=female_goat_id,
            breeding_date=breeding_date,
            method=method or BreedingMethod.NATURAL.value,
            expected_kid_date=expected_kid_date,
            actual_kid_date=actual_kid_date,
            kids_born=kids_born,
            notes=notes,
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )
