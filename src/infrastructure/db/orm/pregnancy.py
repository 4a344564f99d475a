from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import (
    Boolean,
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


class PregnancyORM(Base):
    __tablename__ = "pregnancies"
    __table_args__ = (
        Index("ix_pregnancies_sow_status", "sow_id", "status"),
        Index("ix_pregnancies_service", "service_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    sow_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("sows.id", ondelete="RESTRICT"), nullable=False
    )
    service_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("services.id", ondelete="RESTRICT"), nullable=False
    )
    conception_date: Mapped[date] = mapped_column(Date, nullable=False)
    expected_farrowing_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(String(24), server_default="in_progress", nullable=False)
    confirmed: Mapped[bool] = mapped_column(Boolean, server_default="false", nullable=False)
    confirmation_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    confirmation_method: Mapped[str | None] = mapped_column(String(32), nullable=True)
    ultrasound_count: Mapped[int] = mapped_column(Integer, server_default="0", nullable=False)
    last_ultrasound_date: Mapped[date | None] = mapped_column(Date, nullable=True)
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
