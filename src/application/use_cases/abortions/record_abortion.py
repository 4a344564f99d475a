from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import DataInvalidError, NotFound
from src.application.events.models import AbortionRecordedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.domain.models.abortion import (
    ABORTION_GESTATION_MAX_DAYS,
    ABORTION_GESTATION_MIN_DAYS,
    Abortion,
)
from src.domain.models.pregnancy import PregnancyStatus
from src.domain.services.reproductive_rules import DEFAULT_PERIODS, ReproductivePeriods

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordAbortionInput:
    sow_id: UUID
    pregnancy_id: UUID
    abortion_date: date
    gestation_days: int | None = None
    fetuses_expelled: int | None = None
    suspected_cause: str | None = None
    veterinary_treatment: str | None = None
    notes: str | None = None


def check_abortion_gestation(gestation_days: int) -> None:
    if not ABORTION_GESTATION_MIN_DAYS <= gestation_days <= ABORTION_GESTATION_MAX_DAYS:
        raise DataInvalidError(
            f"Gestation at abortion must be between {ABORTION_GESTATION_MIN_DAYS} and "
            f"{ABORTION_GESTATION_MAX_DAYS} days (got {gestation_days})"
        )


async def execute(
    uow: UnitOfWork,
    payload: RecordAbortionInput,
    *,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
    actor: str | None = None,
) -> Abortion:
    if payload.fetuses_expelled is not None and payload.fetuses_expelled < 0:
        raise DataInvalidError("Fetuses expelled cannot be negative")
    sow = await uow.sows.get(payload.sow_id)
    if not sow:
        raise NotFound(f"Sow {payload.sow_id} not found")
    pregnancy = await uow.pregnancies.get(payload.pregnancy_id)
    if not pregnancy:
        raise NotFound(f"Pregnancy {payload.pregnancy_id} not found")
    if pregnancy.sow_id != sow.id:
        raise DataInvalidError("Pregnancy does not belong to this sow")
    if not pregnancy.is_in_progress:
        raise DataInvalidError(
            f"Only pregnancies in progress can end in an abortion (current: {pregnancy.status})"
        )

    gestation_days = payload.gestation_days
    if gestation_days is None:
        gestation_days = (payload.abortion_date - pregnancy.conception_date).days
    check_abortion_gestation(gestation_days)

    abortion = Abortion.create(
        sow_id=sow.id,
        pregnancy_id=pregnancy.id,
        abortion_date=payload.abortion_date,
        gestation_days=gestation_days,
        recovery_days=periods.post_abortion_recovery_days,
        fetuses_expelled=payload.fetuses_expelled,
        suspected_cause=payload.suspected_cause,
        veterinary_treatment=payload.veterinary_treatment,
        notes=payload.notes,
        created_by=actor,
    )
    created = await uow.abortions.add(abortion)

    pregnancy.status = PregnancyStatus.COMPLETED_ABORTION.value
    pregnancy.updated_by = actor
    pregnancy.bump_version()
    await uow.pregnancies.update(pregnancy)

    await refresh_sow_state(uow, sow.id, expected_version=sow.version, actor=actor)
    uow.add_event(
        AbortionRecordedEvent(
            sow_id=sow.id,
            abortion_id=created.id,
            abortion_date=created.abortion_date,
            recovery_until=created.recovery_until,
            ear_tag=sow.ear_tag,
            alias=sow.alias,
        )
    )
    logger.info(
        "Abortion recorded for sow %s at %s days of gestation", sow.ear_tag, gestation_days
    )
    return created
