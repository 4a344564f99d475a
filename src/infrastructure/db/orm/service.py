from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    Boolean,
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


class ServiceORM(Base):
    __tablename__ = "services"
    __table_args__ = (
        Index("ix_services_heat_date", "heat_id", "service_date"),
        Index("ix_services_sow_date", "sow_id", "service_date"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    sow_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("sows.id", ondelete="RESTRICT"), nullable=False
    )
    heat_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("heats.id", ondelete="RESTRICT"), nullable=False
    )
    boar_id: Mapped[UUID | None] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("boars.id", ondelete="RESTRICT"), nullable=True
    )
    service_date: Mapped[date] = mapped_column(Date, nullable=False)
    service_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    service_type: Mapped[str] = mapped_column(String(16), nullable=False)
    service_number: Mapped[int] = mapped_column(Integer, server_default="1", nullable=False)
    mating_duration_minutes: Mapped[int | None] = mapped_column(Integer, nullable=True)
    mating_quality: Mapped[str | None] = mapped_column(String(32), nullable=True)
    semen_batch: Mapped[str | None] = mapped_column(String(64), nullable=True)
    semen_dose: Mapped[str | None] = mapped_column(String(64), nullable=True)
    semen_volume_ml: Mapped[Decimal | None] = mapped_column(Numeric(6, 2), nullable=True)
    technician: Mapped[str | None] = mapped_column(String(255), nullable=True)
    success: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
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
