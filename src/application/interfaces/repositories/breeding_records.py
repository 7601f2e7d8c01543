from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.breeding_record import BreedingRecord


class BreedingRecordRepository(Protocol):
    async def add(self, record: BreedingRecord) -> BreedingRecord: ...

    async def get(self, record_id: UUID) -> BreedingRecord | None: ...

    async def list(self, *, goat_id: UUID | None = None) -> list[BreedingRecord]: ...

    async def list_recent(self, limit: int) -> list[BreedingRecord]: ...

    async def list_upcoming_kidding(self, start: date, end: date) -> list[BreedingRecord]: ...
