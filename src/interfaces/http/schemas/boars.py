from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BoarCreate(BaseModel):
    ear_tag: str = Field(min_length=1, max_length=50)
    name: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    notes: str | None = None


class BoarUpdate(BaseModel):
    ear_tag: str | None = Field(default=None, min_length=1, max_length=50)
    name: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    status: str | None = None
    notes: str | None = None


class BoarResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    ear_tag: str
    name: str | None
    breed: str | None
    birth_date: date | None
    status: str
    notes: str | None
    created_at: datetime
    updated_at: datetime
    version: int
