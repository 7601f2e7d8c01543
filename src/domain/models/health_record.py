from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class HealthRecordType(str, Enum):
    VACCINATION = "Vaccination"
    DEWORMING = "Deworming"
    TREATMENT = "Treatment"
    CHECKUP = "Checkup"


@dataclass(slots=True)
class HealthRecord:
    id: UUID
    reference_no: str
    goat_id: UUID
    record_type: str  # HealthRecordType
    record_date: date

    description: str | None = None
    medicine: str | None = None
    dosage: str | None = None
    veterinarian: str | None = None
    cost: Decimal | None = None
    next_due_date: date | None = None
    notes: str | None = None

    created_by: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        reference_no: str,
        goat_id: UUID,
        record_type: str,
        record_date: date,
        description: str | None = None,
        medicine: str | None = None,
        dosage: str | None = None,
        veterinarian: str | None = None,
        cost: Decimal | None = None,
        next_due_date: date | None = None,
        notes: str | None = None,
        created_by: UUID | None = None,
    ) -> HealthRecord:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            reference_no=reference_no,
            goat_id=goat_id,
            record_type=record_type,
            record_date=record_date,
            description=description,
            medicine=medicine,
            dosage=dosage,
            veterinarian=veterinarian,
            cost=cost,
            next_due_date=next_due_date,
            notes=notes,
            created_by=created_by,
            created_at=now,
            updated_at=now,
        )
