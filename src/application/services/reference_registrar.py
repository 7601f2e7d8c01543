"""Reference numbers for transactional records.

A reference reads ``<PREFIX>-<YEAR>-<SEQ>``: the record kind prefix, the
four-digit calendar year at creation and a sequence zero-padded to four
digits. Sequences are per kind and never go backwards; they are drawn from the
``reference_counters`` table inside the caller's unit of work, so a rolled back
transaction does not consume a number.
"""

from __future__ import annotations

from datetime import datetime, timezone

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.value_objects.record_kind import RecordKind

SEQUENCE_WIDTH = 4


def format_reference(kind: RecordKind, sequence: int, year: int) -> str:
    if sequence < 1:
        raise ValidationError("Reference sequence must be positive")
    return f"{kind.prefix}-{year:04d}-{sequence:0{SEQUENCE_WIDTH}d}"


def next_reference_from_count(kind: RecordKind, existing_count: int, year: int) -> str:
    """Reference that follows ``existing_count`` records of ``kind``."""
    return format_reference(kind, existing_count + 1, year)


async def allocate_reference(
    uow: UnitOfWork, kind: RecordKind, *, now: datetime | None = None
) -> str:
    moment = now or datetime.now(timezone.utc)
    sequence = await uow.reference_counters.next_value(kind)
    return format_reference(kind, sequence, moment.year)
