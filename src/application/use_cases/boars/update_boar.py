from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.boar import Boar
from src.domain.models.sow import AnimalStatus


@dataclass(slots=True)
class UpdateBoarInput:
    ear_tag: str | None = None
    name: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    status: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork, boar_id: UUID, payload: UpdateBoarInput, actor: str | None = None
) -> Boar:
    boar = await uow.boars.get(boar_id)
    if not boar:
        raise NotFound("Boar not found")
    if payload.status is not None and payload.status not in {s.value for s in AnimalStatus}:
        raise ValidationError(f"Unknown status '{payload.status}'")

    changed = False
    for field_name in ("ear_tag", "name", "breed", "birth_date", "status", "notes"):
        value = getattr(payload, field_name)
        if value is not None and value != getattr(boar, field_name):
            setattr(boar, field_name, value)
            changed = True
    if not changed:
        return boar
    boar.updated_by = actor
    boar.bump_version()
    return await uow.boars.update(boar)
