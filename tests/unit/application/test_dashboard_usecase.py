from __future__ import annotations

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest

from src.application.use_cases.dashboard import get_dashboard


class RecordingRepo:
    def __init__(self, **results) -> None:
        self.results = results
        self.calls: list[tuple] = []

    def __getattr__(self, name):
        if name not in self.results:
            raise AttributeError(name)

        async def method(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            result = self.results[name]
            return result(*args, **kwargs) if callable(result) else result

        return method


def make_uow():
    def count(*, status=None, gender=None):
        return {None: 7, "Male": 3, "Female": 4}[gender]

    return SimpleNamespace(
        goats=RecordingRepo(
            count=count,
            count_by_status={"Active": 7, "Sold": 2},
            breed_distribution=[("Boer", 5), ("Saanen", 2)],
        ),
        breeding_records=RecordingRepo(list_recent=[], list_upcoming_kidding=[]),
        health_records=RecordingRepo(list_due=[]),
        expenses=RecordingRepo(
            total_between=Decimal("120.00"),
            totals_by_category=[("Feed", Decimal("120.00"))],
        ),
        sales_records=RecordingRepo(
            total_between=Decimal("500.00"), totals_by_type=[("Live", Decimal("500.00"))]
        ),
        inventory=RecordingRepo(list_low_stock=[]),
    )


@pytest.mark.asyncio
async def test_dashboard_summarises_herd_and_month():
    uow = make_uow()
    summary = await get_dashboard.execute(uow, today=date(2026, 2, 14))

    assert summary.statistics.total_active == 7
    assert summary.statistics.active_males == 3
    assert summary.statistics.active_females == 4
    assert summary.statistics.by_status == {"Active": 7, "Sold": 2}
    assert summary.breed_distribution[0] == ("Boer", 5)
    assert summary.financial.month_start == date(2026, 2, 1)
    assert summary.financial.month_end == date(2026, 2, 28)
    assert summary.financial.net == Decimal("380.00")


@pytest.mark.asyncio
async def test_dashboard_windows_start_today():
    uow = make_uow()
    await get_dashboard.execute(
        uow, today=date(2026, 12, 20), kidding_window_days=30, health_due_window_days=7
    )

    (_, kidding_args, _), = uow.breeding_records.calls[1:]
    assert kidding_args == (date(2026, 12, 20), date(2027, 1, 19))
    (_, due_args, _), = uow.health_records.calls
    assert due_args == (date(2026, 12, 20), date(2026, 12, 27))
    _, expense_args, _ = uow.expenses.calls[0]
    assert expense_args == (date(2026, 12, 1), date(2026, 12, 31))


def test_month_bounds_handles_december():
    assert get_dashboard.month_bounds(date(2026, 12, 5)) == (date(2026, 12, 1), date(2026, 12, 31))
