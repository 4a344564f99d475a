from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from src.application.errors import NotFound, ReproductiveRuleViolation, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.application.use_cases.reproduction.validate_registration import check_heat
from src.domain.models.heat import Heat, HeatIntensity
from src.domain.services.reproductive_rules import DEFAULT_PERIODS, ReproductivePeriods

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RegisterHeatInput:
    sow_id: UUID
    heat_date: date
    heat_end_date: date | None = None
    intensity: str | None = None
    induced: bool = False
    induction_protocol: str | None = None
    detected_by: str | None = None
    notes: str | None = None


@dataclass(slots=True)
class RegisterHeatOutput:
    heat: Heat
    warnings: list[str] = field(default_factory=list)


async def execute(
    uow: UnitOfWork,
    payload: RegisterHeatInput,
    *,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
    actor: str | None = None,
) -> RegisterHeatOutput:
    if payload.heat_end_date is not None and payload.heat_end_date < payload.heat_date:
        raise ValidationError("Heat end date cannot be before the heat date")
    if payload.intensity is not None and payload.intensity not in {i.value for i in HeatIntensity}:
        raise ValidationError(
            f"Invalid intensity. Must be one of: {', '.join(i.value for i in HeatIntensity)}"
        )

    check = await check_heat(
        uow, payload.sow_id, payload.heat_date, induced=payload.induced, periods=periods
    )
    if check.history is None:
        raise NotFound(f"Sow {payload.sow_id} not found")
    if not check.result.valid:
        raise ReproductiveRuleViolation(check.result.errors, check.result.warnings)

    heat = Heat.create(
        sow_id=payload.sow_id,
        heat_date=payload.heat_date,
        heat_end_date=payload.heat_end_date,
        intensity=payload.intensity,
        induced=payload.induced,
        induction_protocol=payload.induction_protocol,
        detected_by=payload.detected_by,
        notes=payload.notes,
        created_by=actor,
    )
    created = await uow.heats.add(heat)
    await refresh_sow_state(
        uow, payload.sow_id, expected_version=check.history.sow.version, actor=actor
    )
    logger.info(
        "Heat registered for sow %s on %s (induced=%s)",
        check.history.sow.ear_tag,
        payload.heat_date.isoformat(),
        payload.induced,
    )
    return RegisterHeatOutput(heat=created, warnings=list(check.result.warnings))
