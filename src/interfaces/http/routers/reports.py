from __future__ import annotations

from datetime import timedelta

from fastapi import APIRouter, Depends

from src.application.errors import ValidationError
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.reports.pdf_generator import PDFGenerator
from src.infrastructure.reports.report_service import ReportService
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.reports import (
    ReportDefinition,
    ReportDefinitionsResponse,
    ReportParameter,
    ReportRequest,
    ReportResponse,
)

router = APIRouter(prefix="/reports", tags=["reports"])

report_service = ReportService(PDFGenerator())

MAX_REPORT_RANGE = timedelta(days=365)


def _common_parameters() -> list[ReportParameter]:
    return [
        ReportParameter(name="date_from", type="date", required=True),
        ReportParameter(name="date_to", type="date", required=True),
        ReportParameter(
            name="format",
            type="select",
            required=False,
            options=["pdf", "json"],
            default_value="pdf",
        ),
    ]


def validate_range(request: ReportRequest) -> None:
    if request.date_from > request.date_to:
        raise ValidationError("date_from must be before or equal to date_to")
    if (request.date_to - request.date_from) > MAX_REPORT_RANGE:
        raise ValidationError("Date range cannot exceed 365 days")


@router.get("/definitions", response_model=ReportDefinitionsResponse)
async def get_report_definitions(
    context: AuthContext = Depends(get_auth_context),
) -> ReportDefinitionsResponse:
    """Get available report definitions"""
    reports = [
        ReportDefinition(
            id="herd",
            title="Herd Report",
            description="Goat register with breed, gender and status distribution",
            parameters=_common_parameters(),
            formats=["pdf", "json"],
        ),
        ReportDefinition(
            id="financial",
            title="Financial Report",
            description="Income, expenses and net profit for a period",
            parameters=_common_parameters(),
            formats=["pdf", "json"],
        ),
        ReportDefinition(
            id="inventory",
            title="Inventory Report",
            description="Stock levels with low stock and expiry flags",
            parameters=_common_parameters(),
            formats=["pdf", "json"],
        ),
    ]
    return ReportDefinitionsResponse(reports=reports)


@router.post("/herd", response_model=ReportResponse)
async def generate_herd_report(
    request: ReportRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ReportResponse:
    validate_range(request)
    return await report_service.generate_herd_report(request, uow)


@router.post("/financial", response_model=ReportResponse)
async def generate_financial_report(
    request: ReportRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ReportResponse:
    validate_range(request)
    return await report_service.generate_financial_report(request, uow)


@router.post("/inventory", response_model=ReportResponse)
async def generate_inventory_report(
    request: ReportRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ReportResponse:
    validate_range(request)
    return await report_service.generate_inventory_report(request, uow)
