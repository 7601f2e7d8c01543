from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.health_record import HealthRecord


class HealthRecordRepository(Protocol):
    async def add(self, record: HealthRecord) -> HealthRecord: ...

    async def get(self, record_id: UUID) -> HealthRecord | None: ...

    async def list(
        self, *, goat_id: UUID | None = None, record_type: str | None = None
    ) -> list[HealthRecord]: ...

    async def list_due(self, start: date, end: date) -> list[HealthRecord]: ...
