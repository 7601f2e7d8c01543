from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Protocol
from uuid import UUID

from src.domain.models.sales_record import SalesRecord


class SalesRecordRepository(Protocol):
    async def add(self, record: SalesRecord) -> SalesRecord: ...

    async def get(self, record_id: UUID) -> SalesRecord | None: ...

    async def list(
        self,
        *,
        goat_id: UUID | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[SalesRecord]: ...

    async def total_between(self, date_from: date, date_to: date) -> Decimal: ...

    async def totals_by_type(self, date_from: date, date_to: date) -> list[tuple[str, Decimal]]: ...
