from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.sow import Sow


@dataclass(slots=True)
class CreateSowInput:
    ear_tag: str
    alias: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    notes: str | None = None


async def execute(uow: UnitOfWork, payload: CreateSowInput, actor: str | None = None) -> Sow:
    ear_tag = (payload.ear_tag or "").strip()
    if not ear_tag:
        raise ValidationError("Ear tag is required")
    sow = Sow.create(
        ear_tag=ear_tag,
        alias=payload.alias,
        breed=payload.breed,
        birth_date=payload.birth_date,
        notes=payload.notes,
        created_by=actor,
    )
    return await uow.sows.add(sow)
