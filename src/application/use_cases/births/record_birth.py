from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from uuid import UUID

from src.application.errors import DataInvalidError, NotFound, ValidationError
from src.application.events.models import BirthRecordedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.domain.models.birth import (
    BIRTH_GESTATION_MAX_DAYS,
    BIRTH_GESTATION_MIN_DAYS,
    Birth,
    BirthType,
)
from src.domain.models.piglet import Piglet, PigletBirthStatus
from src.domain.models.pregnancy import PregnancyStatus
from src.domain.services.reproductive_rules import DEFAULT_PERIODS, ReproductivePeriods

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RecordBirthInput:
    sow_id: UUID
    pregnancy_id: UUID
    birth_date: date
    born_alive: int
    born_dead: int = 0
    mummified: int = 0
    total_born: int | None = None
    gestation_days: int | None = None
    boar_id: UUID | None = None
    birth_time: time | None = None
    birth_type: str = BirthType.NORMAL.value
    average_weight_kg: Decimal | None = None
    sow_condition: str | None = None
    assisted_by: str | None = None
    expected_weaning_date: date | None = None
    notes: str | None = None


def check_litter_counts(born_alive: int, born_dead: int, mummified: int, total_born: int) -> None:
    if min(born_alive, born_dead, mummified, total_born) < 0:
        raise DataInvalidError("Piglet counts cannot be negative")
    if born_alive + born_dead + mummified != total_born:
        raise DataInvalidError(
            f"Total born ({total_born}) must equal born alive + born dead + mummified "
            f"({born_alive} + {born_dead} + {mummified})"
        )


def check_birth_gestation(gestation_days: int) -> None:
    if not BIRTH_GESTATION_MIN_DAYS <= gestation_days <= BIRTH_GESTATION_MAX_DAYS:
        raise DataInvalidError(
            f"Gestation length must be between {BIRTH_GESTATION_MIN_DAYS} and "
            f"{BIRTH_GESTATION_MAX_DAYS} days (got {gestation_days})"
        )


async def execute(
    uow: UnitOfWork,
    payload: RecordBirthInput,
    *,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
    actor: str | None = None,
) -> Birth:
    if payload.birth_type not in {t.value for t in BirthType}:
        raise ValidationError(f"Invalid birth type '{payload.birth_type}'")
    total_born = payload.total_born
    if total_born is None:
        total_born = payload.born_alive + payload.born_dead + payload.mummified
    check_litter_counts(payload.born_alive, payload.born_dead, payload.mummified, total_born)

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
            f"Only pregnancies in progress can end in a birth (current: {pregnancy.status})"
        )

    gestation_days = payload.gestation_days
    if gestation_days is None:
        gestation_days = (payload.birth_date - pregnancy.conception_date).days
    check_birth_gestation(gestation_days)

    service = await uow.services.get(pregnancy.service_id)
    boar_id = payload.boar_id or (service.boar_id if service else None)

    birth = Birth.create(
        sow_id=sow.id,
        pregnancy_id=pregnancy.id,
        birth_date=payload.birth_date,
        born_alive=payload.born_alive,
        born_dead=payload.born_dead,
        mummified=payload.mummified,
        total_born=total_born,
        gestation_days=gestation_days,
        weaning_age_days=periods.weaning_age_days,
        expected_weaning_date=payload.expected_weaning_date,
        boar_id=boar_id,
        birth_time=payload.birth_time,
        birth_type=payload.birth_type,
        average_weight_kg=payload.average_weight_kg,
        sow_condition=payload.sow_condition,
        assisted_by=payload.assisted_by,
        notes=payload.notes,
        created_by=actor,
    )
    created = await uow.births.add(birth)

    piglets = []
    for birth_status, count in (
        (PigletBirthStatus.ALIVE.value, payload.born_alive),
        (PigletBirthStatus.DEAD.value, payload.born_dead),
        (PigletBirthStatus.MUMMIFIED.value, payload.mummified),
    ):
        piglets.extend(
            Piglet.create(
                birth_id=created.id,
                sow_id=sow.id,
                birth_status=birth_status,
                created_by=actor,
            )
            for _ in range(count)
        )
    if piglets:
        await uow.piglets.add_many(piglets)

    pregnancy.status = PregnancyStatus.COMPLETED_BIRTH.value
    pregnancy.updated_by = actor
    pregnancy.bump_version()
    await uow.pregnancies.update(pregnancy)
    if service and service.success is not True:
        service.success = True
        service.updated_by = actor
        service.bump_version()
        await uow.services.update(service)

    await refresh_sow_state(uow, sow.id, expected_version=sow.version, actor=actor)

    uow.add_event(
        BirthRecordedEvent(
            sow_id=sow.id,
            birth_id=created.id,
            birth_date=created.birth_date,
            born_alive=created.born_alive,
            total_born=created.total_born,
            ear_tag=sow.ear_tag,
            alias=sow.alias,
        )
    )
    logger.info(
        "Birth recorded for sow %s: %s alive of %s", sow.ear_tag, created.born_alive, total_born
    )
    return created
