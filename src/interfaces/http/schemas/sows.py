from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SowCreate(BaseModel):
    ear_tag: str = Field(min_length=1, max_length=50)
    alias: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    notes: str | None = None


class SowUpdate(BaseModel):
    version: int
    ear_tag: str | None = Field(default=None, min_length=1, max_length=50)
    alias: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    status: str | None = None  # active, discarded
    notes: str | None = None


class SowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    ear_tag: str
    alias: str | None
    breed: str | None
    birth_date: date | None
    status: str
    reproductive_status: str
    expected_farrowing_date: date | None
    parity_count: int
    total_piglets_born: int
    total_piglets_alive: int
    total_piglets_dead: int
    total_abortions: int
    last_farrowing_date: date | None
    last_weaning_date: date | None
    notes: str | None
    created_by: str | None
    updated_by: str | None
    created_at: datetime
    updated_at: datetime
    version: int


class SowListResponse(BaseModel):
    items: list[SowResponse]
    total: int
    limit: int
    offset: int
