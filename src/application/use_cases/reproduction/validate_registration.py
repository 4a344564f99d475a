"""Pre-flight checks for heat, service and pregnancy registration.

The register use cases run the same checks before writing, so calling these
first tells a client exactly what a registration would report.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import load_sow_history
from src.domain.models.heat import Heat
from src.domain.models.service import Service
from src.domain.services.reproductive_rules import (
    DEFAULT_PERIODS,
    ReproductivePeriods,
    ValidationResult,
    check_heat_registration,
    check_pregnancy_registration,
    check_service_registration,
)
from src.domain.services.sow_history import SowHistory


@dataclass(slots=True)
class RegistrationCheck:
    result: ValidationResult
    history: SowHistory | None
    heat: Heat | None = None
    heat_services: list[Service] | None = None
    service: Service | None = None


async def check_heat(
    uow: UnitOfWork,
    sow_id: UUID,
    heat_date: date,
    *,
    induced: bool = False,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
) -> RegistrationCheck:
    history = await load_sow_history(uow, sow_id)
    result = check_heat_registration(history, heat_date, periods, induced=induced)
    return RegistrationCheck(result=result, history=history)


async def check_service(
    uow: UnitOfWork,
    sow_id: UUID,
    heat_id: UUID,
    service_date: date,
    *,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
) -> RegistrationCheck:
    history = await load_sow_history(uow, sow_id)
    heat = await uow.heats.get(heat_id)
    heat_services = await uow.services.list_for_heat(heat_id) if heat else []
    result = check_service_registration(history, heat, heat_services, service_date, periods)
    return RegistrationCheck(
        result=result, history=history, heat=heat, heat_services=heat_services
    )


async def check_pregnancy(
    uow: UnitOfWork,
    sow_id: UUID,
    service_id: UUID,
    conception_date: date,
    *,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
) -> RegistrationCheck:
    history = await load_sow_history(uow, sow_id)
    service = await uow.services.get(service_id)
    has_pregnancy = bool(await uow.pregnancies.list_for_service(service_id)) if service else False
    result = check_pregnancy_registration(
        history, service, has_pregnancy, conception_date, periods
    )
    return RegistrationCheck(result=result, history=history, service=service)


async def validate_heat(
    uow: UnitOfWork,
    sow_id: UUID,
    heat_date: date,
    *,
    induced: bool = False,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
) -> ValidationResult:
    check = await check_heat(uow, sow_id, heat_date, induced=induced, periods=periods)
    return check.result


async def validate_service(
    uow: UnitOfWork,
    sow_id: UUID,
    heat_id: UUID,
    service_date: date,
    *,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
) -> ValidationResult:
    check = await check_service(uow, sow_id, heat_id, service_date, periods=periods)
    return check.result


async def validate_pregnancy(
    uow: UnitOfWork,
    sow_id: UUID,
    service_id: UUID,
    conception_date: date,
    *,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
) -> ValidationResult:
    check = await check_pregnancy(uow, sow_id, service_id, conception_date, periods=periods)
    return check.result
