from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    Time,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class BirthORM(Base):
    __tablename__ = "births"
    __table_args__ = (
        CheckConstraint(
            "total_born = born_alive + born_dead + mummified", name="total_born_matches"
        ),
        CheckConstraint("gestation_days BETWEEN 110 AND 120", name="gestation_days_range"),
        Index("ix_births_sow_date", "sow_id", "birth_date"),
        Index("ix_births_expected_weaning", "expected_weaning_date"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    sow_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("sows.id", ondelete="RESTRICT"), nullable=False
    )
    pregnancy_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("pregnancies.id", ondelete="RESTRICT"),
        nullable=False,
        unique=True,
    )
    boar_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("boars.id", ondelete="RESTRICT"), nullable=True
    )
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    birth_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    birth_type: Mapped[str] = mapped_column(String(16), server_default="normal", nullable=False)
    born_alive: Mapped[int] = mapped_column(Integer, nullable=False)
    born_dead: Mapped[int] = mapped_column(Integer, nullable=False)
    mummified: Mapped[int] = mapped_column(Integer, nullable=False)
    total_born: Mapped[int] = mapped_column(Integer, nullable=False)
    gestation_days: Mapped[int] = mapped_column(Integer, nullable=False)
    expected_weaning_date: Mapped[date] = mapped_column(Date, nullable=False)
    average_weight_kg: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    sow_condition: Mapped[str | None] = mapped_column(String(64), nullable=True)
    assisted_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    updated_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
