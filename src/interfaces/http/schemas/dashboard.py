from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.interfaces.http.schemas.breeding import BreedingRecordResponse
from src.interfaces.http.schemas.health_records import HealthRecordResponse
from src.interfaces.http.schemas.inventory import InventoryItemResponse


class DashboardModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HerdStatisticsResponse(DashboardModel):
    total_active: int
    active_males: int
    active_females: int
    by_status: dict[str, int]


class BreedCount(DashboardModel):
    breed: str
    count: int


class AmountByLabel(DashboardModel):
    label: str
    total: Decimal


class FinancialResponse(DashboardModel):
    month_start: date
    month_end: date
    monthly_expenses: Decimal
    monthly_sales: Decimal
    net: Decimal
    expenses_by_category: list[AmountByLabel]
    sales_by_type: list[AmountByLabel]


class DashboardResponse(DashboardModel):
    as_of: date
    statistics: HerdStatisticsResponse
    breed_distribution: list[BreedCount]
    recent_breeding: list[BreedingRecordResponse]
    upcoming_kidding: list[BreedingRecordResponse]
    health_due: list[HealthRecordResponse]
    financial: FinancialResponse
    low_stock_items: list[InventoryItemResponse]
