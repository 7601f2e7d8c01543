from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.weight_record import WeightRecord


class WeightRecordRepository(Protocol):
    async def add(self, record: WeightRecord) -> WeightRecord: ...

    async def list_by_goat(self, goat_id: UUID) -> list[WeightRecord]: ...
