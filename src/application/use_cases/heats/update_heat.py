from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import DataInvalidError, NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.domain.models.heat import MANUAL_HEAT_TRANSITIONS, Heat, HeatIntensity


@dataclass(slots=True)
class UpdateHeatInput:
    heat_end_date: date | None = None
    intensity: str | None = None
    status: str | None = None
    induction_protocol: str | None = None
    detected_by: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork, heat_id: UUID, payload: UpdateHeatInput, actor: str | None = None
) -> Heat:
    heat = await uow.heats.get(heat_id)
    if not heat:
        raise NotFound("Heat not found")

    if payload.status is not None and payload.status != heat.status:
        allowed = MANUAL_HEAT_TRANSITIONS.get(heat.status, set())
        if payload.status not in allowed:
            raise DataInvalidError(
                f"Cannot change heat status from '{heat.status}' to '{payload.status}'"
            )
        heat.status = payload.status
    if payload.intensity is not None:
        if payload.intensity not in {i.value for i in HeatIntensity}:
            raise ValidationError(f"Invalid intensity '{payload.intensity}'")
        heat.intensity = payload.intensity
    if payload.heat_end_date is not None:
        if payload.heat_end_date < heat.heat_date:
            raise ValidationError("Heat end date cannot be before the heat date")
        heat.heat_end_date = payload.heat_end_date
    for field_name in ("induction_protocol", "detected_by", "notes"):
        value = getattr(payload, field_name)
        if value is not None:
            setattr(heat, field_name, value)

    heat.updated_by = actor
    heat.bump_version()
    updated = await uow.heats.update(heat)
    await refresh_sow_state(uow, heat.sow_id, actor=actor)
    return updated
