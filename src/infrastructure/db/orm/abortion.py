from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class AbortionORM(Base):
    __tablename__ = "abortions"
    __table_args__ = (
        CheckConstraint("gestation_days BETWEEN 1 AND 113", name="gestation_days_range"),
        Index("ix_abortions_sow_date", "sow_id", "abortion_date"),
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
    abortion_date: Mapped[date] = mapped_column(Date, nullable=False)
    gestation_days: Mapped[int] = mapped_column(Integer, nullable=False)
    recovery_until: Mapped[date] = mapped_column(Date, nullable=False)
    fetuses_expelled: Mapped[int | None] = mapped_column(Integer, nullable=True)
    suspected_cause: Mapped[str | None] = mapped_column(String(255), nullable=True)
    veterinary_treatment: Mapped[str | None] = mapped_column(Text, nullable=True)
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
