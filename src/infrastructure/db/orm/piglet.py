from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import (
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class PigletORM(Base):
    __tablename__ = "piglets"
    __table_args__ = (
        Index("ix_piglets_birth_status", "birth_id", "current_status"),
        Index("ix_piglets_sow", "sow_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    birth_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("births.id", ondelete="RESTRICT"), nullable=False
    )
    sow_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("sows.id", ondelete="RESTRICT"), nullable=False
    )
    ear_tag: Mapped[str | None] = mapped_column(String(64), nullable=True)
    sex: Mapped[str | None] = mapped_column(String(8), nullable=True)
    birth_status: Mapped[str] = mapped_column(String(16), nullable=False)
    current_status: Mapped[str] = mapped_column(String(16), nullable=False)
    birth_weight_kg: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    weaning_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    weaning_weight_kg: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)
    exit_date: Mapped[date | None] = mapped_column(Date, nullable=True)
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
