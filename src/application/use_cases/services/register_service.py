from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, time
from decimal import Decimal
from uuid import UUID

from src.application.errors import NotFound, ReproductiveRuleViolation, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.application.use_cases.reproduction.validate_registration import check_service
from src.domain.models.heat import HeatStatus
from src.domain.models.service import Service, ServiceType
from src.domain.services.reproductive_rules import DEFAULT_PERIODS, ReproductivePeriods

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RegisterServiceInput:
    sow_id: UUID
    heat_id: UUID
    service_date: date
    service_type: str
    boar_id: UUID | None = None
    service_time: time | None = None
    mating_duration_minutes: int | None = None
    mating_quality: str | None = None
    semen_batch: str | None = None
    semen_dose: str | None = None
    semen_volume_ml: Decimal | None = None
    technician: str | None = None
    notes: str | None = None


@dataclass(slots=True)
class RegisterServiceOutput:
    service: Service
    warnings: list[str] = field(default_factory=list)


async def execute(
    uow: UnitOfWork,
    payload: RegisterServiceInput,
    *,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
    actor: str | None = None,
) -> RegisterServiceOutput:
    valid_types = {t.value for t in ServiceType}
    if payload.service_type not in valid_types:
        raise ValidationError(f"Invalid service type. Must be one of: {', '.join(valid_types)}")

    check = await check_service(
        uow, payload.sow_id, payload.heat_id, payload.service_date, periods=periods
    )
    if check.history is None:
        raise NotFound(f"Sow {payload.sow_id} not found")
    if check.heat is None:
        raise NotFound(f"Heat {payload.heat_id} not found")
    if not check.result.valid:
        raise ReproductiveRuleViolation(check.result.errors, check.result.warnings)

    if payload.boar_id is not None:
        boar = await uow.boars.get(payload.boar_id)
        if not boar:
            raise NotFound(f"Boar {payload.boar_id} not found")
        if not boar.is_active:
            raise ValidationError(f"Boar {boar.ear_tag} is not active")

    heat = check.heat
    service = Service.create(
        sow_id=payload.sow_id,
        heat_id=payload.heat_id,
        service_date=payload.service_date,
        service_type=payload.service_type,
        service_number=len(check.heat_services or []) + 1,
        boar_id=payload.boar_id,
        service_time=payload.service_time,
        mating_duration_minutes=payload.mating_duration_minutes,
        mating_quality=payload.mating_quality,
        semen_batch=payload.semen_batch,
        semen_dose=payload.semen_dose,
        semen_volume_ml=payload.semen_volume_ml,
        technician=payload.technician,
        notes=payload.notes,
        created_by=actor,
    )
    created = await uow.services.add(service)

    if heat.status != HeatStatus.SERVICED.value:
        heat.mark_serviced()
        heat.updated_by = actor
        await uow.heats.update(heat)

    await refresh_sow_state(
        uow, payload.sow_id, expected_version=check.history.sow.version, actor=actor
    )
    logger.info(
        "Service #%s (%s) registered for sow %s",
        created.service_number,
        created.service_type,
        check.history.sow.ear_tag,
    )
    return RegisterServiceOutput(service=created, warnings=list(check.result.warnings))
