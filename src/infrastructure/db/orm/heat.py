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


class HeatORM(Base):
    __tablename__ = "heats"
    __table_args__ = (
        Index("ix_heats_sow_date", "sow_id", "heat_date"),
        Index(
            "ix_heats_detected",
            "status",
            "heat_date",
            postgresql_where="status = 'detected'",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    sow_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("sows.id", ondelete="RESTRICT"), nullable=False
    )
    heat_date: Mapped[date] = mapped_column(Date, nullable=False)
    heat_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    intensity: Mapped[str | None] = mapped_column(String(16), nullable=True)
    status: Mapped[str] = mapped_column(String(16), server_default="detected", nullable=False)
    induced: Mapped[bool] = mapped_column(Boolean, server_default="false", nullable=False)
    induction_protocol: Mapped[str | None] = mapped_column(String(255), nullable=True)
    detected_by: Mapped[str | None] = mapped_column(String(255), nullable=True)
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
