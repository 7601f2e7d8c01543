from __future__ import annotations

from typing import Protocol

from src.domain.value_objects.record_kind import RecordKind


class ReferenceCounterRepository(Protocol):
    async def next_value(self, kind: RecordKind) -> int:
        """Atomically advance and return the sequence for ``kind``.

        Runs inside the caller's transaction so the allocation is discarded
        together with the record if the transaction rolls back.
        """
        ...
