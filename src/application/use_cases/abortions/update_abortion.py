from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from src.application.errors import DataInvalidError, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.application.use_cases.abortions.record_abortion import check_abortion_gestation
from src.domain.models.abortion import Abortion
from src.domain.services.reproductive_rules import DEFAULT_PERIODS, ReproductivePeriods


@dataclass(slots=True)
class UpdateAbortionInput:
    abortion_date: date | None = None
    gestation_days: int | None = None
    fetuses_expelled: int | None = None
    suspected_cause: str | None = None
    veterinary_treatment: str | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    abortion_id: UUID,
    payload: UpdateAbortionInput,
    *,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
    actor: str | None = None,
) -> Abortion:
    abortion = await uow.abortions.get(abortion_id)
    if not abortion:
        raise NotFound("Abortion not found")

    if payload.gestation_days is not None:
        check_abortion_gestation(payload.gestation_days)
        abortion.gestation_days = payload.gestation_days
    if payload.abortion_date is not None:
        abortion.abortion_date = payload.abortion_date
        abortion.recovery_until = payload.abortion_date + timedelta(
            days=periods.post_abortion_recovery_days
        )
    if payload.fetuses_expelled is not None:
        if payload.fetuses_expelled < 0:
            raise DataInvalidError("Fetuses expelled cannot be negative")
        abortion.fetuses_expelled = payload.fetuses_expelled
    for field_name in ("suspected_cause", "veterinary_treatment", "notes"):
        value = getattr(payload, field_name)
        if value is not None:
            setattr(abortion, field_name, value)

    abortion.updated_by = actor
    abortion.bump_version()
    updated = await uow.abortions.update(abortion)
    await refresh_sow_state(uow, abortion.sow_id, actor=actor)
    return updated
