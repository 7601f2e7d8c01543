from __future__ import annotations

import base64
import io
import math
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any

from reportlab.graphics.charts.barcharts import VerticalBarChart
from reportlab.graphics.shapes import Drawing
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm, inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

KPI_LABELS = {
    "total_goats": "Total goats",
    "active_goats": "Active goats",
    "active_males": "Active bucks",
    "active_females": "Active does",
    "sold_in_period": "Goats sold in period",
    "total_income": "Total income",
    "total_expenses": "Total expenses",
    "net_profit": "Net profit",
    "sales_count": "Sales recorded",
    "expense_count": "Expenses recorded",
    "total_items": "Items in stock",
    "low_stock_items": "Items at or below minimum",
    "stock_value": "Stock value",
    "expiring_items": "Items expiring in period",
}

BRAND = colors.HexColor("#3d6b35")
BRAND_LIGHT = colors.HexColor("#e8f0e3")
CONTENT_WIDTH = 16 * cm
MAX_CHART_BARS = 10

KPI_TABLE_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (0, -1), BRAND_LIGHT),
        ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
        ("FONTNAME", (1, 0), (1, -1), "Helvetica"),
        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("TOPPADDING", (0, 0), (-1, -1), 6),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
        ("LINEBELOW", (0, 0), (-1, -1), 0.5, colors.grey),
    ]
)

DATA_TABLE_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), BRAND),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 9),
        ("FONTSIZE", (0, 1), (-1, -1), 8),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, BRAND_LIGHT]),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("BOX", (0, 0), (-1, -1), 0.75, BRAND),
        ("INNERGRID", (0, 0), (-1, -1), 0.25, colors.grey),
    ]
)


def column_key(title: str) -> str:
    """Row key for a column title: ``"Tag No"`` reads ``row["tag_no"]``."""
    return title.lower().replace(" ", "_")


class PDFGenerator:
    """Builds report documents out of flowable sections and encodes them as base64."""

    def __init__(self):
        self.styles = getSampleStyleSheet()
        self.styles.add(
            ParagraphStyle(
                name="ReportTitle",
                parent=self.styles["Title"],
                fontSize=18,
                textColor=BRAND,
                alignment=TA_CENTER,
                spaceAfter=18,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="SectionHeading",
                parent=self.styles["Heading2"],
                fontSize=13,
                textColor=BRAND,
                spaceBefore=6,
                spaceAfter=8,
            )
        )
        self.styles.add(
            ParagraphStyle(name="Muted", parent=self.styles["Normal"], textColor=colors.grey)
        )
        self.styles.add(ParagraphStyle(name="Cell", parent=self.styles["Normal"], fontSize=8))

    def _format_cell(self, value: Any):
        if value is None:
            return ""
        if isinstance(value, Decimal):
            return f"{value:,.2f}"
        if isinstance(value, (date, datetime)):
            return value.isoformat()[:10]
        # long free text wraps inside the cell
        return Paragraph(str(value), self.styles["Cell"])

    def _section(self, title: str, *body) -> list:
        return [Paragraph(title, self.styles["SectionHeading"]), *body, Spacer(1, 0.6 * cm)]

    def _empty(self, title: str) -> list:
        return self._section(title, Paragraph("No data available", self.styles["Muted"]))

    def create_header(self, title: str, subtitle: str | None = None) -> list:
        stamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
        elements: list = [Paragraph(title, self.styles["ReportTitle"])]
        if subtitle:
            elements.append(Paragraph(subtitle, self.styles["Normal"]))
        elements.append(Paragraph(f"Generated {stamp}", self.styles["Muted"]))
        elements.append(Spacer(1, 0.8 * cm))
        return elements

    def create_kpi_section(self, title: str, kpis: dict[str, Any]) -> list:
        rows = [
            [KPI_LABELS.get(key, key.replace("_", " ").capitalize()), self._format_kpi(value)]
            for key, value in kpis.items()
        ]
        if not rows:
            return self._empty(title)
        table = Table(rows, colWidths=[CONTENT_WIDTH * 0.6, CONTENT_WIDTH * 0.4])
        table.setStyle(KPI_TABLE_STYLE)
        return self._section(title, table)

    @staticmethod
    def _format_kpi(value: Any) -> str:
        if isinstance(value, Decimal):
            return f"{value:,.2f}"
        return str(value)

    def create_table_section(self, title: str, data: list[dict], columns: list[str]) -> list:
        """Tabulate ``data`` under ``columns``; values are looked up by :func:`column_key`."""
        if not data:
            return self._empty(title)
        keys = [column_key(col) for col in columns]
        body = [[self._format_cell(row.get(key)) for key in keys] for row in data]
        width = CONTENT_WIDTH / len(columns)
        table = Table([columns, *body], colWidths=[width] * len(columns), repeatRows=1)
        table.setStyle(DATA_TABLE_STYLE)
        return self._section(title, table)

    def create_chart_section(self, title: str, chart_data: dict[str, float]) -> list:
        if not chart_data:
            return self._empty(title)
        return self._section(title, self._create_bar_chart(chart_data))

    @staticmethod
    def _apply_value_axis_padding(chart, values: list[float], padding: float = 5.0) -> None:
        if not values:
            return
        top = max(values)
        chart.valueAxis.valueMin = 0
        chart.valueAxis.valueMax = padding if top <= 0 else math.ceil(top + padding)

    def _create_bar_chart(self, data: dict[str, float]) -> Drawing:
        labels = list(data)[:MAX_CHART_BARS]
        values = [float(data[label]) for label in labels]

        chart = VerticalBarChart()
        chart.x, chart.y = 40, 45
        chart.width, chart.height = 320, 120
        chart.data = [values]
        chart.categoryAxis.categoryNames = labels
        chart.categoryAxis.labels.angle = 30
        chart.categoryAxis.labels.boxAnchor = "ne"
        chart.bars[0].fillColor = BRAND
        self._apply_value_axis_padding(chart, values, padding=max(values) * 0.1 + 1)

        drawing = Drawing(CONTENT_WIDTH, 190)
        drawing.add(chart)
        return drawing

    def generate_pdf(self, elements: list) -> str:
        """Render ``elements`` to an A4 PDF and return it base64 encoded."""
        with io.BytesIO() as buffer:
            document = SimpleDocTemplate(
                buffer,
                pagesize=A4,
                leftMargin=inch,
                rightMargin=inch,
                topMargin=inch,
                bottomMargin=0.75 * inch,
            )
            document.build(elements)
            return base64.b64encode(buffer.getvalue()).decode("ascii")
