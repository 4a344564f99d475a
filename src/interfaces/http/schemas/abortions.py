from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AbortionCreate(BaseModel):
    sow_id: UUID
    pregnancy_id: UUID
    abortion_date: date
    gestation_days: int | None = None
    fetuses_expelled: int | None = Field(default=None, ge=0)
    suspected_cause: str | None = None
    veterinary_treatment: str | None = None
    notes: str | None = None


class AbortionUpdate(BaseModel):
    abortion_date: date | None = None
    gestation_days: int | None = None
    fetuses_expelled: int | None = Field(default=None, ge=0)
    suspected_cause: str | None = None
    veterinary_treatment: str | None = None
    notes: str | None = None


class AbortionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    sow_id: UUID
    pregnancy_id: UUID
    abortion_date: date
    gestation_days: int
    recovery_until: date
    fetuses_expelled: int | None
    suspected_cause: str | None
    veterinary_treatment: str | None
    notes: str | None
    created_by: str | None
    updated_by: str | None
    created_at: datetime
    updated_at: datetime
    version: int
