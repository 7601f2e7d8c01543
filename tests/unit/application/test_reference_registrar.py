from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from src.application.errors import ValidationError
from src.application.services.reference_registrar import (
    allocate_reference,
    format_reference,
    next_reference_from_count,
)
from src.domain.value_objects.record_kind import RecordKind


def test_format_reference_pads_sequence():
    assert format_reference(RecordKind.BREEDING, 1, 2026) == "BR-2026-0001"
    assert format_reference(RecordKind.EXPENSE, 42, 2026) == "EXP-2026-0042"


def test_format_reference_keeps_wide_sequences():
    assert format_reference(RecordKind.SALE, 12345, 2026) == "SR-2026-12345"


def test_format_reference_rejects_non_positive_sequence():
    with pytest.raises(ValidationError):
        format_reference(RecordKind.HEALTH, 0, 2026)


def test_next_reference_follows_existing_count():
    assert next_reference_from_count(RecordKind.INVENTORY, 9, 2025) == "INV-2025-0010"


@pytest.mark.asyncio
async def test_allocate_reference_uses_counter_and_year():
    issued: list[RecordKind] = []

    async def next_value(kind):
        issued.append(kind)
        return len(issued)

    uow = SimpleNamespace(reference_counters=SimpleNamespace(next_value=next_value))
    now = datetime(2027, 1, 2, tzinfo=timezone.utc)

    first = await allocate_reference(uow, RecordKind.HEALTH, now=now)
    second = await allocate_reference(uow, RecordKind.HEALTH, now=now)

    assert (first, second) == ("HR-2027-0001", "HR-2027-0002")
    assert issued == [RecordKind.HEALTH, RecordKind.HEALTH]
