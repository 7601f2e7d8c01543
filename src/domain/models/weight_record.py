from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4


@dataclass(slots=True)
class WeightRecord:
    id: UUID
    goat_id: UUID
    recorded_on: date
    weight: Decimal
    notes: str | None = None
    created_by: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        goat_id: UUID,
        recorded_on: date,
        weight: Decimal,
        notes: str | None = None,
        created_by: UUID | None = None,
    ) -> WeightRecord:
        return cls(
            id=uuid4(),
            goat_id=goat_id,
            recorded_on=recorded_on,
            weight=weight,
            notes=notes,
            created_by=created_by,
            created_at=datetime.now(timezone.utc),
        )
