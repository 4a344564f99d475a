from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from sqlalchemy import Date, DateTime, Index, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class SowORM(Base):
    __tablename__ = "sows"
    __table_args__ = (Index("ix_sows_status_reproductive", "status", "reproductive_status"),)

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True)
    ear_tag: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    alias: Mapped[str | None] = mapped_column(String(128), nullable=True)
    breed: Mapped[str | None] = mapped_column(String(128), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String(16), server_default="active", nullable=False)
    reproductive_status: Mapped[str] = mapped_column(
        String(16), server_default="empty", nullable=False
    )
    expected_farrowing_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    parity_count: Mapped[int] = mapped_column(Integer, server_default="0", nullable=False)
    total_piglets_born: Mapped[int] = mapped_column(Integer, server_default="0", nullable=False)
    total_piglets_alive: Mapped[int] = mapped_column(Integer, server_default="0", nullable=False)
    total_piglets_dead: Mapped[int] = mapped_column(Integer, server_default="0", nullable=False)
    total_abortions: Mapped[int] = mapped_column(Integer, server_default="0", nullable=False)
    last_farrowing_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    last_weaning_date: Mapped[date | None] = mapped_column(Date, nullable=True)
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
