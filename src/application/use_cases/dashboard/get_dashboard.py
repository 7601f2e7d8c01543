"""Farm dashboard summary.

Every figure is recomputed from the database on each call; nothing is cached.
Both ends of the kidding and health-due windows are inclusive.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.breeding_record import BreedingRecord
from src.domain.models.health_record import HealthRecord
from src.domain.models.inventory_item import InventoryItem
from src.domain.value_objects.goat_status import Gender, GoatStatus

RECENT_BREEDING_LIMIT = 5


@dataclass(slots=True)
class HerdStatistics:
    total_active: int
    active_males: int
    active_females: int
    by_status: dict[str, int] = field(default_factory=dict)


@dataclass(slots=True)
class FinancialSummary:
    month_start: date
    month_end: date
    monthly_expenses: Decimal
    monthly_sales: Decimal
    expenses_by_category: list[tuple[str, Decimal]] = field(default_factory=list)
    sales_by_type: list[tuple[str, Decimal]] = field(default_factory=list)

    @property
    def net(self) -> Decimal:
        return self.monthly_sales - self.monthly_expenses


@dataclass(slots=True)
class DashboardSummary:
    as_of: date
    statistics: HerdStatistics
    breed_distribution: list[tuple[str, int]]
    recent_breeding: list[BreedingRecord]
    upcoming_kidding: list[BreedingRecord]
    health_due: list[HealthRecord]
    financial: FinancialSummary
    low_stock_items: list[InventoryItem]


def month_bounds(day: date) -> tuple[date, date]:
    start = day.replace(day=1)
    if start.month == 12:
        next_month = start.replace(year=start.year + 1, month=1)
    else:
        next_month = start.replace(month=start.month + 1)
    return start, next_month - timedelta(days=1)


async def execute(
    uow: UnitOfWork,
    *,
    today: date,
    kidding_window_days: int = 30,
    health_due_window_days: int = 7,
) -> DashboardSummary:
    active = GoatStatus.ACTIVE.value
    statistics = HerdStatistics(
        total_active=await uow.goats.count(status=active),
        active_males=await uow.goats.count(status=active, gender=Gender.MALE.value),
        active_females=await uow.goats.count(status=active, gender=Gender.FEMALE.value),
        by_status=await uow.goats.count_by_status(),
    )

    month_start, month_end = month_bounds(today)
    financial = FinancialSummary(
        month_start=month_start,
        month_end=month_end,
        monthly_expenses=await uow.expenses.total_between(month_start, month_end),
        monthly_sales=await uow.sales_records.total_between(month_start, month_end),
        expenses_by_category=await uow.expenses.totals_by_category(month_start, month_end),
        sales_by_type=await uow.sales_records.totals_by_type(month_start, month_end),
    )

    return DashboardSummary(
        as_of=today,
        statistics=statistics,
        breed_distribution=await uow.goats.breed_distribution(status=active),
        recent_breeding=await uow.breeding_records.list_recent(RECENT_BREEDING_LIMIT),
        upcoming_kidding=await uow.breeding_records.list_upcoming_kidding(
            today, today + timedelta(days=kidding_window_days)
        ),
        health_due=await uow.health_records.list_due(
            today, today + timedelta(days=health_due_window_days)
        ),
        financial=financial,
        low_stock_items=await uow.inventory.list_low_stock(),
    )
