from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import NotFound
from src.application.events.models import LitterWeanedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WeanLitterOutput:
    birth_id: UUID
    sow_id: UUID
    weaning_date: date
    piglets_weaned: int
    already_weaned: bool


async def execute(uow: UnitOfWork, birth_id: UUID, actor: str | None = None) -> WeanLitterOutput:
    """Wean every still-nursing piglet of a litter on its expected weaning date.

    Piglets that were already weaned, sold or died are left untouched, so
    running this twice changes nothing the second time.
    """
    birth = await uow.births.get(birth_id)
    if not birth:
        raise NotFound("Birth not found")
    sow = await uow.sows.get(birth.sow_id)
    if not sow:
        raise NotFound("Sow not found")

    nursing = [p for p in await uow.piglets.list_for_birth(birth_id) if p.is_nursing]
    if not nursing:
        return WeanLitterOutput(
            birth_id=birth.id,
            sow_id=birth.sow_id,
            weaning_date=birth.expected_weaning_date,
            piglets_weaned=0,
            already_weaned=True,
        )

    for piglet in nursing:
        piglet.wean(birth.expected_weaning_date)
        piglet.updated_by = actor
        await uow.piglets.update(piglet)

    await refresh_sow_state(uow, sow.id, expected_version=sow.version, actor=actor)
    uow.add_event(
        LitterWeanedEvent(
            sow_id=sow.id,
            birth_id=birth.id,
            weaning_date=birth.expected_weaning_date,
            piglets_weaned=len(nursing),
            ear_tag=sow.ear_tag,
            alias=sow.alias,
        )
    )
    logger.info(
        "Weaned %s piglet(s) of sow %s on %s",
        len(nursing),
        sow.ear_tag,
        birth.expected_weaning_date.isoformat(),
    )
    return WeanLitterOutput(
        birth_id=birth.id,
        sow_id=sow.id,
        weaning_date=birth.expected_weaning_date,
        piglets_weaned=len(nursing),
        already_weaned=False,
    )
