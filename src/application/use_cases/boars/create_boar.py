from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.boar import Boar


@dataclass(slots=True)
class CreateBoarInput:
    ear_tag: str
    name: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    notes: str | None = None


async def execute(uow: UnitOfWork, payload: CreateBoarInput, actor: str | None = None) -> Boar:
    ear_tag = (payload.ear_tag or "").strip()
    if not ear_tag:
        raise ValidationError("Ear tag is required")
    boar = Boar.create(
        ear_tag=ear_tag,
        name=payload.name,
        breed=payload.breed,
        birth_date=payload.birth_date,
        notes=payload.notes,
        created_by=actor,
    )
    return await uow.boars.add(boar)
