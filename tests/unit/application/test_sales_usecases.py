from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import ConflictError, NotFound, PermissionDenied, ValidationError
from src.application.use_cases.sales import create_sale
from src.domain.models.goat import Goat
from src.domain.value_objects.role import Role


class StubGoatsRepo:
    def __init__(self, *goats: Goat) -> None:
        self.goats = {goat.id: goat for goat in goats}

    async def get(self, goat_id):
        return self.goats.get(goat_id)

    async def set_status(self, goat_id, status, *, expected_status=None):
        goat = self.goats.get(goat_id)
        if goat is None:
            return False
        if expected_status is not None and goat.status != expected_status:
            return False
        goat.status = status
        return True


class StaleReadGoatsRepo(StubGoatsRepo):
    """Returns the goat as it looked before another request sold it."""

    async def get(self, goat_id):
        goat = self.goats.get(goat_id)
        return replace(goat, status="Active") if goat else None


class StubSalesRepo:
    def __init__(self) -> None:
        self.added = []

    async def add(self, record):
        self.added.append(record)
        return record


class StubCounters:
    def __init__(self) -> None:
        self.calls = 0

    async def next_value(self, kind):
        self.calls += 1
        return self.calls


def make_uow(*goats: Goat):
    committed: list[bool] = []

    async def commit():
        committed.append(True)

    return SimpleNamespace(
        goats=StubGoatsRepo(*goats),
        sales_records=StubSalesRepo(),
        reference_counters=StubCounters(),
        commit=commit,
        committed=committed,
    )


def sale_for(goat_id, price: str = "250.00") -> create_sale.CreateSaleInput:
    return create_sale.CreateSaleInput(
        goat_id=goat_id, sale_date=date(2026, 5, 4), sale_price=Decimal(price)
    )


@pytest.mark.asyncio
async def test_sale_marks_goat_sold_and_commits_once():
    goat = Goat.create(tag_no="S-1", breed="Boer", gender="Male")
    uow = make_uow(goat)
    record = await create_sale.execute(uow, Role.STAFF, uuid4(), sale_for(goat.id))
    assert goat.status == "Sold"
    assert record.reference_no.startswith("SR-")
    assert record.reference_no.endswith("-0001")
    assert record.sale_type == "Live"
    assert record.payment_status == "Paid"
    assert uow.committed == [True]


@pytest.mark.asyncio
async def test_sale_of_missing_goat_is_not_found():
    uow = make_uow()
    with pytest.raises(NotFound):
        await create_sale.execute(uow, Role.ADMIN, uuid4(), sale_for(uuid4()))
    assert uow.reference_counters.calls == 0


@pytest.mark.asyncio
async def test_sale_of_sold_goat_conflicts():
    goat = Goat.create(tag_no="S-2", breed="Boer", gender="Male", status="Sold")
    uow = make_uow(goat)
    with pytest.raises(ConflictError):
        await create_sale.execute(uow, Role.ADMIN, uuid4(), sale_for(goat.id))
    assert not uow.sales_records.added
    assert not uow.committed


@pytest.mark.asyncio
async def test_sale_rejects_negative_price():
    goat = Goat.create(tag_no="S-3", breed="Boer", gender="Female")
    uow = make_uow(goat)
    with pytest.raises(ValidationError):
        await create_sale.execute(uow, Role.ADMIN, uuid4(), sale_for(goat.id, "-1"))
    assert goat.status == "Active"


@pytest.mark.asyncio
async def test_viewer_cannot_record_sale():
    goat = Goat.create(tag_no="S-4", breed="Boer", gender="Female")
    uow = make_uow(goat)
    with pytest.raises(PermissionDenied):
        await create_sale.execute(uow, Role.VIEWER, uuid4(), sale_for(goat.id))
    assert goat.status == "Active"


@pytest.mark.asyncio
async def test_sale_conflicts_when_goat_sold_after_it_was_read():
    goat = Goat.create(tag_no="S-5", breed="Boer", gender="Male", status="Sold")
    uow = make_uow()
    uow.goats = StaleReadGoatsRepo(goat)
    with pytest.raises(ConflictError):
        await create_sale.execute(uow, Role.ADMIN, uuid4(), sale_for(goat.id))
    assert not uow.sales_records.added
    assert not uow.committed
