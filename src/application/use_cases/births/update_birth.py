from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal
from uuid import UUID

from src.application.errors import DataInvalidError, NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.application.use_cases.births.record_birth import (
    check_birth_gestation,
    check_litter_counts,
)
from src.domain.models.birth import Birth, BirthType
from src.domain.models.piglet import PigletBirthStatus

_COUNT_FIELDS = ("born_alive", "born_dead", "mummified", "total_born")
_PLAIN_FIELDS = (
    "birth_date",
    "birth_time",
    "boar_id",
    "average_weight_kg",
    "sow_condition",
    "assisted_by",
    "expected_weaning_date",
    "notes",
)


@dataclass(slots=True)
class UpdateBirthInput:
    birth_date: date | None = None
    born_alive: int | None = None
    born_dead: int | None = None
    mummified: int | None = None
    total_born: int | None = None
    gestation_days: int | None = None
    boar_id: UUID | None = None
    birth_time: time | None = None
    birth_type: str | None = None
    average_weight_kg: Decimal | None = None
    sow_condition: str | None = None
    assisted_by: str | None = None
    expected_weaning_date: date | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork, birth_id: UUID, payload: UpdateBirthInput, actor: str | None = None
) -> Birth:
    birth = await uow.births.get(birth_id)
    if not birth:
        raise NotFound("Birth not found")

    if any(getattr(payload, name) is not None for name in _COUNT_FIELDS):
        # Unspecified counts keep their stored value
        merged = {}
        for name in _COUNT_FIELDS:
            value = getattr(payload, name)
            merged[name] = value if value is not None else getattr(birth, name)
        check_litter_counts(**merged)
        for birth_status, field_name in (
            (PigletBirthStatus.ALIVE.value, "born_alive"),
            (PigletBirthStatus.DEAD.value, "born_dead"),
            (PigletBirthStatus.MUMMIFIED.value, "mummified"),
        ):
            recorded = await uow.piglets.count_for_birth(birth_id, birth_status)
            if merged[field_name] < recorded:
                raise DataInvalidError(
                    f"{field_name} ({merged[field_name]}) cannot be lower than the "
                    f"{recorded} {birth_status} piglet record(s) of this litter"
                )
        for name, value in merged.items():
            setattr(birth, name, value)

    if payload.gestation_days is not None:
        check_birth_gestation(payload.gestation_days)
        birth.gestation_days = payload.gestation_days
    if payload.birth_type is not None:
        if payload.birth_type not in {t.value for t in BirthType}:
            raise ValidationError(f"Invalid birth type '{payload.birth_type}'")
        birth.birth_type = payload.birth_type
    for field_name in _PLAIN_FIELDS:
        value = getattr(payload, field_name)
        if value is not None:
            setattr(birth, field_name, value)

    birth.updated_by = actor
    birth.bump_version()
    updated = await uow.births.update(birth)
    await refresh_sow_state(uow, birth.sow_id, actor=actor)
    return updated
