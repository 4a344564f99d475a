from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ServiceCreate(BaseModel):
    sow_id: UUID
    heat_id: UUID
    service_date: date
    service_type: str  # natural, artificial
    boar_id: UUID | None = None
    service_time: time | None = None
    mating_duration_minutes: int | None = Field(default=None, ge=0)
    mating_quality: str | None = None
    semen_batch: str | None = None
    semen_dose: str | None = None
    semen_volume_ml: Decimal | None = Field(default=None, ge=0)
    technician: str | None = None
    notes: str | None = None


class ServiceUpdate(BaseModel):
    service_date: date | None = None
    service_type: str | None = None
    service_time: time | None = None
    boar_id: UUID | None = None
    mating_duration_minutes: int | None = Field(default=None, ge=0)
    mating_quality: str | None = None
    semen_batch: str | None = None
    semen_dose: str | None = None
    semen_volume_ml: Decimal | None = Field(default=None, ge=0)
    technician: str | None = None
    notes: str | None = None


class ServiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    sow_id: UUID
    heat_id: UUID
    boar_id: UUID | None
    service_date: date
    service_time: time | None
    service_type: str
    service_number: int
    mating_duration_minutes: int | None
    mating_quality: str | None
    semen_batch: str | None
    semen_dose: str | None
    semen_volume_ml: Decimal | None
    technician: str | None
    success: bool | None
    notes: str | None
    created_by: str | None
    updated_by: str | None
    created_at: datetime
    updated_at: datetime
    version: int


class ServiceCreatedResponse(ServiceResponse):
    warnings: list[str] = []
