from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from src.application.errors import (
    DataInvalidError,
    ImmutableRecordError,
    NotFound,
    ValidationError,
)
from src.application.events.models import PregnancyConfirmedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.application.use_cases.pregnancies.register_pregnancy import validate_confirmation
from src.domain.models.pregnancy import (
    TERMINAL_PREGNANCY_STATUSES,
    Pregnancy,
    PregnancyStatus,
)
from src.domain.services.reproductive_rules import DEFAULT_PERIODS, ReproductivePeriods
from src.utils.datetime_tz import today_local


@dataclass(slots=True)
class UpdatePregnancyInput:
    conception_date: date | None = None
    status: str | None = None
    confirmed: bool | None = None
    confirmation_date: date | None = None
    confirmation_method: str | None = None
    notes: str | None = None

    def touches_only_notes(self) -> bool:
        return all(
            getattr(self, name) is None
            for name in (
                "conception_date",
                "status",
                "confirmed",
                "confirmation_date",
                "confirmation_method",
            )
        )


async def _set_service_success(uow: UnitOfWork, service_id: UUID, value, actor) -> None:
    service = await uow.services.get(service_id)
    if service and service.success is not value:
        service.success = value
        service.updated_by = actor
        service.bump_version()
        await uow.services.update(service)


async def execute(
    uow: UnitOfWork,
    pregnancy_id: UUID,
    payload: UpdatePregnancyInput,
    *,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
    actor: str | None = None,
    today: date | None = None,
) -> Pregnancy:
    pregnancy = await uow.pregnancies.get(pregnancy_id)
    if not pregnancy:
        raise NotFound("Pregnancy not found")
    sow = await uow.sows.get(pregnancy.sow_id)
    if not sow:
        raise NotFound("Sow not found")

    if pregnancy.is_terminal:
        if not payload.touches_only_notes():
            raise ImmutableRecordError(
                f"Pregnancy is closed ({pregnancy.status}); only notes can be edited"
            )
        if payload.notes is not None:
            pregnancy.notes = payload.notes
            pregnancy.updated_by = actor
            pregnancy.bump_version()
            return await uow.pregnancies.update(pregnancy)
        return pregnancy

    was_confirmed = pregnancy.confirmed
    bumped = False

    if payload.status is not None and payload.status != pregnancy.status:
        if payload.status in TERMINAL_PREGNANCY_STATUSES:
            raise DataInvalidError(
                "Completed statuses are set by recording a birth or an abortion"
            )
        if payload.status == PregnancyStatus.NOT_CONFIRMED.value:
            pregnancy.status = payload.status
            if pregnancy.confirmed:
                pregnancy.unconfirm()
                bumped = True
            await _set_service_success(uow, pregnancy.service_id, False, actor)
        elif payload.status == PregnancyStatus.IN_PROGRESS.value:
            others = await uow.pregnancies.list(
                sow_id=pregnancy.sow_id, status=PregnancyStatus.IN_PROGRESS.value
            )
            if any(p.id != pregnancy.id for p in others):
                raise DataInvalidError("Sow already has another pregnancy in progress")
            pregnancy.status = payload.status
            await _set_service_success(uow, pregnancy.service_id, None, actor)
        else:
            raise ValidationError(f"Invalid pregnancy status '{payload.status}'")

    if payload.conception_date is not None and payload.conception_date != pregnancy.conception_date:
        if payload.conception_date > (today or today_local()):
            raise ValidationError("Conception date cannot be in the future")
        if pregnancy.confirmation_date and pregnancy.confirmation_date < payload.conception_date:
            raise DataInvalidError("Confirmation date cannot be before the conception date")
        pregnancy.conception_date = payload.conception_date
        pregnancy.expected_farrowing_date = payload.conception_date + timedelta(
            days=periods.gestation_period_days
        )

    if payload.confirmed is True and pregnancy.is_in_progress:
        confirmation_date = payload.confirmation_date or pregnancy.confirmation_date
        method = payload.confirmation_method or pregnancy.confirmation_method
        validate_confirmation(pregnancy.conception_date, confirmation_date, method)
        if (
            not pregnancy.confirmed
            or confirmation_date != pregnancy.confirmation_date
            or method != pregnancy.confirmation_method
        ):
            pregnancy.confirm(confirmation_date, method)
            bumped = True
        await _set_service_success(uow, pregnancy.service_id, True, actor)
    elif payload.confirmed is True:
        raise DataInvalidError("Only pregnancies in progress can be confirmed")
    elif payload.confirmed is False and pregnancy.confirmed:
        pregnancy.unconfirm()
        bumped = True
        await _set_service_success(uow, pregnancy.service_id, False, actor)

    if payload.notes is not None:
        pregnancy.notes = payload.notes

    pregnancy.updated_by = actor
    if not bumped:
        pregnancy.bump_version()
    updated = await uow.pregnancies.update(pregnancy)
    await refresh_sow_state(uow, pregnancy.sow_id, expected_version=sow.version, actor=actor)

    if updated.confirmed and not was_confirmed:
        uow.add_event(
            PregnancyConfirmedEvent(
                sow_id=sow.id,
                pregnancy_id=updated.id,
                expected_farrowing_date=updated.expected_farrowing_date,
                ear_tag=sow.ear_tag,
                alias=sow.alias,
            )
        )
    return updated
