from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PigletCreate(BaseModel):
    birth_status: str = "alive"  # alive, dead, mummified
    ear_tag: str | None = None
    sex: str | None = None
    birth_weight_kg: Decimal | None = Field(default=None, ge=0)
    notes: str | None = None


class PigletUpdate(BaseModel):
    birth_status: str | None = None
    current_status: str | None = None  # lactating, weaned, sold, dead
    ear_tag: str | None = None
    sex: str | None = None
    birth_weight_kg: Decimal | None = Field(default=None, ge=0)
    weaning_date: date | None = None
    weaning_weight_kg: Decimal | None = Field(default=None, ge=0)
    exit_date: date | None = None
    notes: str | None = None


class PigletResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    birth_id: UUID
    sow_id: UUID
    ear_tag: str | None
    sex: str | None
    birth_status: str
    current_status: str
    birth_weight_kg: Decimal | None
    weaning_date: date | None
    weaning_weight_kg: Decimal | None
    exit_date: date | None
    notes: str | None
    created_at: datetime
    updated_at: datetime
    version: int
