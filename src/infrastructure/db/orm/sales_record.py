from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    Date,
    DateTime,
    ForeignKey,
    Index,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class SalesRecordORM(Base):
    __tablename__ = "sales_records"
    __table_args__ = (
        UniqueConstraint("reference_no", name="ux_sales_records_reference_no"),
        Index("idx_sales_records_sale_date", "sale_date"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    reference_no: Mapped[str] = mapped_column(String(32), nullable=False)
    goat_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("goats.id", ondelete="RESTRICT"), nullable=False
    )
    sale_date: Mapped[date] = mapped_column(Date, nullable=False)
    sale_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    buyer_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    buyer_contact: Mapped[str | None] = mapped_column(String(100), nullable=True)
    sale_type: Mapped[str] = mapped_column(String(16), nullable=False, server_default="Live")
    weight_at_sale: Mapped[Decimal | None] = mapped_column(Numeric(8, 2), nullable=True)
    payment_status: Mapped[str] = mapped_column(
        String(16), nullable=False, server_default="Paid"
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_by: Mapped[UUID | None] = mapped_column(Uuid(as_uuid=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
