from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class HeatCreate(BaseModel):
    sow_id: UUID
    heat_date: date
    heat_end_date: date | None = None
    intensity: str | None = None  # low, medium, high
    induced: bool = False
    induction_protocol: str | None = None
    detected_by: str | None = None
    notes: str | None = None


class HeatUpdate(BaseModel):
    heat_end_date: date | None = None
    intensity: str | None = None
    status: str | None = None  # not_serviced, cancelled
    induction_protocol: str | None = None
    detected_by: str | None = None
    notes: str | None = None


class HeatResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    sow_id: UUID
    heat_date: date
    heat_end_date: date | None
    intensity: str | None
    status: str
    induced: bool
    induction_protocol: str | None
    detected_by: str | None
    notes: str | None
    created_by: str | None
    updated_by: str | None
    created_at: datetime
    updated_at: datetime
    version: int


class HeatCreatedResponse(HeatResponse):
    warnings: list[str] = []
