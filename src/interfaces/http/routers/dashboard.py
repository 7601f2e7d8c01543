from __future__ import annotations

from datetime import date, datetime, timezone

from fastapi import APIRouter, Depends, Query

from src.application.use_cases.dashboard import get_dashboard
from src.config.settings import Settings
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_app_settings, get_auth_context, get_uow
from src.interfaces.http.routers.breeding import with_goats as breeding_with_goats
from src.interfaces.http.routers.health_records import with_goats as health_with_goats
from src.interfaces.http.schemas.dashboard import (
    AmountByLabel,
    BreedCount,
    DashboardResponse,
    FinancialResponse,
    HerdStatisticsResponse,
)
from src.interfaces.http.schemas.inventory import InventoryItemResponse

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard_endpoint(
    date_param: date = Query(
        alias="date", default_factory=lambda: datetime.now(timezone.utc).date()
    ),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
) -> DashboardResponse:
    summary = await get_dashboard.execute(
        uow,
        today=date_param,
        kidding_window_days=settings.kidding_window_days,
        health_due_window_days=settings.health_due_window_days,
    )
    stats = summary.statistics
    financial = summary.financial
    return DashboardResponse(
        as_of=summary.as_of,
        statistics=HerdStatisticsResponse(
            total_active=stats.total_active,
            active_males=stats.active_males,
            active_females=stats.active_females,
            by_status=stats.by_status,
        ),
        breed_distribution=[
            BreedCount(breed=breed, count=count) for breed, count in summary.breed_distribution
        ],
        recent_breeding=await breeding_with_goats(uow, summary.recent_breeding),
        upcoming_kidding=await breeding_with_goats(uow, summary.upcoming_kidding),
        health_due=await health_with_goats(uow, summary.health_due),
        financial=FinancialResponse(
            month_start=financial.month_start,
            month_end=financial.month_end,
            monthly_expenses=financial.monthly_expenses,
            monthly_sales=financial.monthly_sales,
            net=financial.net,
            expenses_by_category=[
                AmountByLabel(label=label, total=total)
                for label, total in financial.expenses_by_category
            ],
            sales_by_type=[
                AmountByLabel(label=label, total=total) for label, total in financial.sales_by_type
            ],
        ),
        low_stock_items=[InventoryItemResponse.model_validate(i) for i in summary.low_stock_items],
    )
