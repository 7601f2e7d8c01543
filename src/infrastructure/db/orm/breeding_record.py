from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class BreedingRecordORM(Base):
    __tablename__ = "breeding_records"
    __table_args__ = (
        UniqueConstraint("reference_no", name="ux_breeding_records_reference_no"),
        Index("idx_breeding_records_expected_kid_date", "expected_kid_date"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    reference_no: Mapped[str] = mapped_column(String(32), nullable=False)
    male_goat_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("goats.id", ondelete="CASCADE"), nullable=False
    )
    female_goat_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("goats.id", ondelete="CASCADE"), nullable=False
    )
    breeding_date: Mapped[date] = mapped_column(Date, nullable=False)
    method: Mapped[str] = mapped_column(String(16), nullable=False, server_default="Natural")
    expected_kid_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    actual_kid_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    kids_born: Mapped[int | None] = mapped_column(Integer, nullable=True)
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
