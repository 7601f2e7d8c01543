from __future__ import annotations

from datetime import date
from typing import Any, Literal

from pydantic import BaseModel


class ReportParameter(BaseModel):
    name: str
    type: Literal["date", "select"]
    required: bool
    options: list[str] | None = None
    default_value: Any | None = None


class ReportDefinition(BaseModel):
    id: str
    title: str
    description: str
    parameters: list[ReportParameter]
    formats: list[str]


class ReportDefinitionsResponse(BaseModel):
    reports: list[ReportDefinition]


class ReportRequest(BaseModel):
    date_from: date
    date_to: date
    format: Literal["pdf", "json"] = "pdf"


class ReportResponse(BaseModel):
    report_id: str
    title: str
    generated_at: str
    format: str
    content: str | None = None  # base64 for PDF
    data: dict[str, Any] | None = None  # structured data when format=json
    file_name: str | None = None
