from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BirthCreate(BaseModel):
    sow_id: UUID
    pregnancy_id: UUID
    birth_date: date
    born_alive: int = Field(ge=0)
    born_dead: int = Field(default=0, ge=0)
    mummified: int = Field(default=0, ge=0)
    total_born: int | None = Field(default=None, ge=0)
    gestation_days: int | None = None
    boar_id: UUID | None = None
    birth_time: time | None = None
    birth_type: str = "normal"  # normal, assisted, cesarean
    average_weight_kg: Decimal | None = Field(default=None, ge=0)
    sow_condition: str | None = None
    assisted_by: str | None = None
    expected_weaning_date: date | None = None
    notes: str | None = None


class BirthUpdate(BaseModel):
    birth_date: date | None = None
    born_alive: int | None = Field(default=None, ge=0)
    born_dead: int | None = Field(default=None, ge=0)
    mummified: int | None = Field(default=None, ge=0)
    total_born: int | None = Field(default=None, ge=0)
    gestation_days: int | None = None
    boar_id: UUID | None = None
    birth_time: time | None = None
    birth_type: str | None = None
    average_weight_kg: Decimal | None = Field(default=None, ge=0)
    sow_condition: str | None = None
    assisted_by: str | None = None
    expected_weaning_date: date | None = None
    notes: str | None = None


class BirthResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    sow_id: UUID
    pregnancy_id: UUID
    boar_id: UUID | None
    birth_date: date
    birth_time: time | None
    birth_type: str
    born_alive: int
    born_dead: int
    mummified: int
    total_born: int
    gestation_days: int
    expected_weaning_date: date
    average_weight_kg: Decimal | None
    sow_condition: str | None
    assisted_by: str | None
    notes: str | None
    created_by: str | None
    updated_by: str | None
    created_at: datetime
    updated_at: datetime
    version: int


class WeanLitterResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    birth_id: UUID
    sow_id: UUID
    weaning_date: date
    piglets_weaned: int
    already_weaned: bool
