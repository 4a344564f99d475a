from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from uuid import UUID

from src.application.errors import ConflictError, NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.sow import AnimalStatus, Sow

# Reproductive fields are derived from the records and never set here
_EDITABLE_FIELDS = ("ear_tag", "alias", "breed", "birth_date", "status", "notes")


@dataclass(slots=True)
class UpdateSowInput:
    version: int
    ear_tag: str | None = None
    alias: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    status: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork, sow_id: UUID, payload: UpdateSowInput, actor: str | None = None
) -> Sow:
    if payload.version < 1:
        raise ValidationError("Invalid version value")
    existing = await uow.sows.get(sow_id)
    if not existing:
        raise NotFound("Sow not found")
    if payload.status is not None and payload.status not in {s.value for s in AnimalStatus}:
        raise ValidationError(
            f"Invalid status. Must be one of: {', '.join(s.value for s in AnimalStatus)}"
        )
    data: dict = {}
    for field_name in _EDITABLE_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            data[field_name] = value
    if "ear_tag" in data and not data["ear_tag"].strip():
        raise ValidationError("Ear tag cannot be empty")
    if not data:
        return existing
    data["updated_at"] = datetime.now(timezone.utc)
    data["updated_by"] = actor
    updated = await uow.sows.update(sow_id, data, expected_version=payload.version)
    if not updated:
        raise ConflictError("Version conflict")
    return updated
