from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.application.errors import DataInvalidError, NotFound, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.domain.models.piglet import Piglet, PigletBirthStatus

_COUNT_FIELD = {
    PigletBirthStatus.ALIVE.value: "born_alive",
    PigletBirthStatus.DEAD.value: "born_dead",
    PigletBirthStatus.MUMMIFIED.value: "mummified",
}


@dataclass(slots=True)
class AddPigletInput:
    birth_status: str = PigletBirthStatus.ALIVE.value
    ear_tag: str | None = None
    sex: str | None = None
    birth_weight_kg: Decimal | None = None
    notes: str | None = None


async def execute(
    uow: UnitOfWork, birth_id: UUID, payload: AddPigletInput, actor: str | None = None
) -> Piglet:
    """Add a piglet record to a litter, never beyond the litter's recorded counts."""
    if payload.birth_status not in _COUNT_FIELD:
        raise ValidationError(f"Invalid birth status '{payload.birth_status}'")
    birth = await uow.births.get(birth_id)
    if not birth:
        raise NotFound("Birth not found")

    allowed = getattr(birth, _COUNT_FIELD[payload.birth_status])
    recorded = await uow.piglets.count_for_birth(birth_id, payload.birth_status)
    if recorded >= allowed:
        raise DataInvalidError(
            f"Litter already has {recorded} {payload.birth_status} piglet record(s) "
            f"out of {allowed}"
        )

    piglet = Piglet.create(
        birth_id=birth.id,
        sow_id=birth.sow_id,
        birth_status=payload.birth_status,
        ear_tag=payload.ear_tag,
        sex=payload.sex,
        birth_weight_kg=payload.birth_weight_kg,
        notes=payload.notes,
        created_by=actor,
    )
    created = await uow.piglets.add(piglet)
    await refresh_sow_state(uow, birth.sow_id, actor=actor)
    return created
