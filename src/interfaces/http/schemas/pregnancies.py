from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class PregnancyCreate(BaseModel):
    sow_id: UUID
    service_id: UUID
    conception_date: date
    confirmed: bool = False
    confirmation_date: date | None = None
    confirmation_method: str | None = None  # ultrasound, no_return_to_heat, visual, other
    notes: str | None = None


class PregnancyConfirm(BaseModel):
    confirmation_date: date
    confirmation_method: str


class PregnancyUpdate(BaseModel):
    conception_date: date | None = None
    status: str | None = None  # in_progress, not_confirmed
    confirmed: bool | None = None
    confirmation_date: date | None = None
    confirmation_method: str | None = None
    notes: str | None = None


class PregnancyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    sow_id: UUID
    service_id: UUID
    conception_date: date
    expected_farrowing_date: date
    status: str
    confirmed: bool
    confirmation_date: date | None
    confirmation_method: str | None
    ultrasound_count: int
    last_ultrasound_date: date | None
    notes: str | None
    created_by: str | None
    updated_by: str | None
    created_at: datetime
    updated_at: datetime
    version: int


class PregnancyCreatedResponse(PregnancyResponse):
    warnings: list[str] = []
