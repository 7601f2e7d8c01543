from __future__ import annotations

import uuid
from collections import Counter
from datetime import date, datetime, timezone
from decimal import Decimal

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.value_objects.goat_status import GoatStatus
from src.infrastructure.reports.pdf_generator import PDFGenerator
from src.interfaces.http.schemas.reports import ReportRequest, ReportResponse


class ReportService:
    def __init__(self, pdf_generator: PDFGenerator):
        self.pdf_generator = pdf_generator

    @staticmethod
    def _round_floats(obj, ndigits: int = 2):
        """Recursively round float/Decimal values and stringify dates for JSON output."""
        if isinstance(obj, dict):
            return {k: ReportService._round_floats(v, ndigits) for k, v in obj.items()}
        if isinstance(obj, list):
            return [ReportService._round_floats(v, ndigits) for v in obj]
        if isinstance(obj, (float, Decimal)):
            return round(float(obj), ndigits)
        if isinstance(obj, (date, datetime)):
            return obj.isoformat()
        return obj

    @staticmethod
    def _period_label(request: ReportRequest) -> str:
        return f"Period: {request.date_from.isoformat()} - {request.date_to.isoformat()}"

    def _response(
        self,
        *,
        report_id: str,
        title: str,
        slug: str,
        request: ReportRequest,
        data: dict | None = None,
        content: str | None = None,
    ) -> ReportResponse:
        return ReportResponse(
            report_id=report_id,
            title=title,
            generated_at=datetime.now(timezone.utc).isoformat(),
            format=request.format,
            content=content,
            data=self._round_floats(data) if data is not None else None,
            file_name=f"{slug}_{request.date_from}_{request.date_to}.{request.format}",
        )

    async def generate_herd_report(self, request: ReportRequest, uow: UnitOfWork) -> ReportResponse:
        report_id = str(uuid.uuid4())
        goats = await uow.goats.list()
        active = [g for g in goats if g.status == GoatStatus.ACTIVE.value]
        breed_counts = Counter(g.breed for g in active)
        gender_counts = Counter(g.gender for g in active)
        status_counts = Counter(g.status for g in goats)
        sales = await uow.sales_records.list(date_from=request.date_from, date_to=request.date_to)

        summary = {
            "total_goats": len(goats),
            "active_goats": len(active),
            "active_males": gender_counts.get("Male", 0),
            "active_females": gender_counts.get("Female", 0),
            "sold_in_period": len(sales),
        }
        rows = [
            {
                "tag_no": g.tag_no,
                "name": g.name,
                "breed": g.breed,
                "gender": g.gender,
                "status": g.status,
                "birth_date": g.birth_date,
                "weight": g.weight,
            }
            for g in goats
        ]

        title = "Herd Report"
        if request.format == "json":
            data = {
                "summary": summary,
                "breed_distribution": dict(breed_counts.most_common()),
                "gender_distribution": dict(gender_counts),
                "status_counts": dict(status_counts),
                "goats": rows,
            }
            return self._response(
                report_id=report_id, title=title, slug="herd", request=request, data=data
            )

        elements = []
        elements.extend(self.pdf_generator.create_header(title, self._period_label(request)))
        elements.extend(self.pdf_generator.create_kpi_section("Herd Summary", summary))
        elements.extend(
            self.pdf_generator.create_chart_section(
                "Active Goats by Breed", {k: float(v) for k, v in breed_counts.most_common()}
            )
        )
        elements.extend(
            self.pdf_generator.create_table_section(
                "Goat Register",
                rows,
                ["Tag No", "Name", "Breed", "Gender", "Status", "Birth Date", "Weight"],
            )
        )
        content = self.pdf_generator.generate_pdf(elements)
        return self._response(
            report_id=report_id, title=title, slug="herd", request=request, content=content
        )

    async def generate_financial_report(
        self, request: ReportRequest, uow: UnitOfWork
    ) -> ReportResponse:
        report_id = str(uuid.uuid4())
        sales = await uow.sales_records.list(date_from=request.date_from, date_to=request.date_to)
        expenses = await uow.expenses.list(date_from=request.date_from, date_to=request.date_to)
        total_income = await uow.sales_records.total_between(request.date_from, request.date_to)
        total_expenses = await uow.expenses.total_between(request.date_from, request.date_to)
        by_category = await uow.expenses.totals_by_category(request.date_from, request.date_to)
        by_sale_type = await uow.sales_records.totals_by_type(request.date_from, request.date_to)

        monthly: dict[str, dict[str, Decimal]] = {}
        for sale in sales:
            bucket = monthly.setdefault(
                sale.sale_date.strftime("%Y-%m"),
                {"income": Decimal("0"), "expenses": Decimal("0")},
            )
            bucket["income"] += sale.sale_price
        for expense in expenses:
            bucket = monthly.setdefault(
                expense.expense_date.strftime("%Y-%m"),
                {"income": Decimal("0"), "expenses": Decimal("0")},
            )
            bucket["expenses"] += expense.amount
        monthly_rows = [
            {
                "month": month,
                "income": values["income"],
                "expenses": values["expenses"],
                "net": values["income"] - values["expenses"],
            }
            for month, values in sorted(monthly.items())
        ]

        summary = {
            "total_income": total_income,
            "total_expenses": total_expenses,
            "net_profit": total_income - total_expenses,
            "sales_count": len(sales),
            "expense_count": len(expenses),
        }

        title = "Financial Report"
        if request.format == "json":
            data = {
                "summary": summary,
                "expenses_by_category": dict(by_category),
                "income_by_sale_type": dict(by_sale_type),
                "monthly": monthly_rows,
            }
            return self._response(
                report_id=report_id, title=title, slug="financial", request=request, data=data
            )

        elements = []
        elements.extend(self.pdf_generator.create_header(title, self._period_label(request)))
        elements.extend(self.pdf_generator.create_kpi_section("Financial Summary", summary))
        elements.extend(
            self.pdf_generator.create_chart_section(
                "Expenses by Category", {k: float(v) for k, v in by_category}
            )
        )
        elements.extend(
            self.pdf_generator.create_table_section(
                "Income by Sale Type",
                [{"sale_type": k, "income": v} for k, v in by_sale_type],
                ["Sale Type", "Income"],
            )
        )
        elements.extend(
            self.pdf_generator.create_table_section(
                "Monthly Breakdown", monthly_rows, ["Month", "Income", "Expenses", "Net"]
            )
        )
        content = self.pdf_generator.generate_pdf(elements)
        return self._response(
            report_id=report_id, title=title, slug="financial", request=request, content=content
        )

    async def generate_inventory_report(
        self, request: ReportRequest, uow: UnitOfWork
    ) -> ReportResponse:
        report_id = str(uuid.uuid4())
        items = await uow.inventory.list()
        rows = []
        stock_value = Decimal("0")
        expiring = 0
        for item in items:
            value = item.quantity * item.unit_price if item.unit_price is not None else None
            if value is not None:
                stock_value += value
            if item.expiry_date and request.date_from <= item.expiry_date <= request.date_to:
                expiring += 1
            rows.append(
                {
                    "reference_no": item.reference_no,
                    "item_name": item.item_name,
                    "category": item.category,
                    "quantity": item.quantity,
                    "unit": item.unit,
                    "min_stock": item.min_stock,
                    "expiry_date": item.expiry_date,
                    "value": value,
                    "low_stock": "Yes" if item.is_low_stock else "No",
                }
            )

        summary = {
            "total_items": len(items),
            "low_stock_items": sum(1 for item in items if item.is_low_stock),
            "stock_value": stock_value,
            "expiring_items": expiring,
        }

        title = "Inventory Report"
        if request.format == "json":
            data = {"summary": summary, "items": rows}
            return self._response(
                report_id=report_id, title=title, slug="inventory", request=request, data=data
            )

        elements = []
        elements.extend(self.pdf_generator.create_header(title, self._period_label(request)))
        elements.extend(self.pdf_generator.create_kpi_section("Stock Summary", summary))
        elements.extend(
            self.pdf_generator.create_table_section(
                "Stock Levels",
                rows,
                ["Item Name", "Category", "Quantity", "Unit", "Min Stock", "Low Stock"],
            )
        )
        content = self.pdf_generator.generate_pdf(elements)
        return self._response(
            report_id=report_id, title=title, slug="inventory", request=request, content=content
        )
