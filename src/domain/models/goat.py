from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from uuid import UUID, uuid4

from src.domain.value_objects.goat_status import GoatStatus


@dataclass(slots=True)
class Goat:
    id: UUID
    tag_no: str
    breed: str
    gender: str
    name: str | None = None
    birth_date: date | None = None
    status: str = GoatStatus.ACTIVE.value
    weight: Decimal | None = None
    purpose: str | None = None
    source: str | None = None
    purchase_price: Decimal | None = None
    purchase_date: date | None = None
    notes: str | None = None

    # Genealogy fields
    sire_id: UUID | None = None
    dam_id: UUID | None = None

    created_by: UUID | None = None
    updated_by: UUID | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        tag_no: str,
        breed: str,
        gender: str,
        name: str | None = None,
        birth_date: date | None = None,
        status: str | None = None,
        weight: Decimal | None = None,
        purpose: str | None = None,
        source: str | None = None,
        purchase_price: Decimal | None = None,
        purchase_date: date | None = None,
        notes: str | None = None,
        sire_id: UUID | None = None,
        dam_id: UUID | None = None,
        created_by: UUID | None = None,
    ) -> Goat:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            tag_no=tag_no,
            breed=breed,
            gender=gender,
            name=name,
            birth_date=birth_date,
            status=status or GoatStatus.ACTIVE.value,
            weight=weight,
            purpose=purpose,
            source=source,
            purchase_price=purchase_price,
            purchase_date=purchase_date,
            notes=notes,
            sire_id=sire_id,
            dam_id=dam_id,
            created_by=created_by,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def is_active(self) -> bool:
        return self.status == GoatStatus.ACTIVE.value

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
