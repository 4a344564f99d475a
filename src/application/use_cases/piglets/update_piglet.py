from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from uuid import UUID

from src.application.errors import DataInvalidError, ImmutableRecordError, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.domain.models.piglet import PIGLET_TRANSITIONS, Piglet, PigletStatus
from src.utils.datetime_tz import today_local


@dataclass(slots=True)
class UpdatePigletInput:
    birth_status: str | None = None
    current_status: str | None = None
    ear_tag: str | None = None
    sex: str | None = None
    birth_weight_kg: Decimal | None = None
    weaning_date: date | None = None
    weaning_weight_kg: Decimal | None = None
    exit_date: date | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    piglet_id: UUID,
    payload: UpdatePigletInput,
    actor: str | None = None,
    today: date | None = None,
) -> Piglet:
    piglet = await uow.piglets.get(piglet_id)
    if not piglet:
        raise NotFound("Piglet not found")
    if payload.birth_status is not None and payload.birth_status != piglet.birth_status:
        raise ImmutableRecordError("Birth status of a piglet cannot be changed")

    target = payload.current_status
    if target is not None and target != piglet.current_status:
        if target not in PIGLET_TRANSITIONS.get(piglet.current_status, set()):
            raise DataInvalidError(
                f"Cannot change piglet status from '{piglet.current_status}' to '{target}'"
            )
        if target == PigletStatus.WEANED.value:
            weaning_date = payload.weaning_date
            if weaning_date is None:
                birth = await uow.births.get(piglet.birth_id)
                weaning_date = birth.expected_weaning_date if birth else today or today_local()
            piglet.current_status = target
            piglet.weaning_date = weaning_date
        else:
            piglet.current_status = target
            piglet.exit_date = payload.exit_date or today or today_local()

    for field_name in (
        "ear_tag",
        "sex",
        "birth_weight_kg",
        "weaning_date",
        "weaning_weight_kg",
        "exit_date",
        "notes",
    ):
        value = getattr(payload, field_name)
        if value is not None:
            setattr(piglet, field_name, value)

    piglet.updated_by = actor
    piglet.bump_version()
    updated = await uow.piglets.update(piglet)
    await refresh_sow_state(uow, piglet.sow_id, actor=actor)
    return updated
