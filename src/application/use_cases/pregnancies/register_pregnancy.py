from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from src.application.errors import (
    DataInvalidError,
    NotFound,
    ReproductiveRuleViolation,
    ValidationError,
)
from src.application.events.models import PregnancyConfirmedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.application.use_cases.reproduction.validate_registration import check_pregnancy
from src.domain.models.pregnancy import ConfirmationMethod, Pregnancy
from src.domain.services.reproductive_rules import DEFAULT_PERIODS, ReproductivePeriods
from src.utils.datetime_tz import today_local

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RegisterPregnancyInput:
    sow_id: UUID
    service_id: UUID
    conception_date: date
    confirmed: bool = False
    confirmation_date: date | None = None
    confirmation_method: str | None = None
    notes: str | None = None


@dataclass(slots=True)
class RegisterPregnancyOutput:
    pregnancy: Pregnancy
    warnings: list[str] = field(default_factory=list)


def validate_confirmation(
    conception_date: date, confirmation_date: date | None, method: str | None
) -> None:
    if confirmation_date is None or method is None:
        raise DataInvalidError("Confirmation date and method are required to confirm a pregnancy")
    if method not in {m.value for m in ConfirmationMethod}:
        raise ValidationError(
            f"Invalid confirmation method. Must be one of: "
            f"{', '.join(m.value for m in ConfirmationMethod)}"
        )
    if confirmation_date < conception_date:
        raise DataInvalidError("Confirmation date cannot be before the conception date")


async def execute(
    uow: UnitOfWork,
    payload: RegisterPregnancyInput,
    *,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
    actor: str | None = None,
    today: date | None = None,
) -> RegisterPregnancyOutput:
    today = today or today_local()
    if payload.conception_date > today:
        raise ValidationError("Conception date cannot be in the future")
    if payload.confirmed:
        validate_confirmation(
            payload.conception_date, payload.confirmation_date, payload.confirmation_method
        )

    check = await check_pregnancy(
        uow, payload.sow_id, payload.service_id, payload.conception_date, periods=periods
    )
    if check.history is None:
        raise NotFound(f"Sow {payload.sow_id} not found")
    if check.service is None:
        raise NotFound(f"Service {payload.service_id} not found")
    if not check.result.valid:
        raise ReproductiveRuleViolation(check.result.errors, check.result.warnings)

    pregnancy = Pregnancy.create(
        sow_id=payload.sow_id,
        service_id=payload.service_id,
        conception_date=payload.conception_date,
        gestation_days=periods.gestation_period_days,
        confirmation_date=payload.confirmation_date if payload.confirmed else None,
        confirmation_method=payload.confirmation_method if payload.confirmed else None,
        notes=payload.notes,
        created_by=actor,
    )
    created = await uow.pregnancies.add(pregnancy)

    if created.confirmed:
        service = check.service
        service.success = True
        service.updated_by = actor
        service.bump_version()
        await uow.services.update(service)

    await refresh_sow_state(
        uow, payload.sow_id, expected_version=check.history.sow.version, actor=actor
    )

    sow = check.history.sow
    if created.confirmed:
        uow.add_event(
            PregnancyConfirmedEvent(
                sow_id=sow.id,
                pregnancy_id=created.id,
                expected_farrowing_date=created.expected_farrowing_date,
                ear_tag=sow.ear_tag,
                alias=sow.alias,
            )
        )
    logger.info(
        "Pregnancy registered for sow %s (confirmed=%s, expected farrowing %s)",
        sow.ear_tag,
        created.confirmed,
        created.expected_farrowing_date.isoformat(),
    )
    return RegisterPregnancyOutput(pregnancy=created, warnings=list(check.result.warnings))
