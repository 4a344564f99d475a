from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import HasDependentsError, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.domain.models.pregnancy import PregnancyStatus

logger = logging.getLogger(__name__)


async def reopen_pregnancy(uow: UnitOfWork, pregnancy_id: UUID, actor: str | None) -> None:
    """Put a pregnancy whose outcome was removed back in progress.

    If the sow meanwhile has another pregnancy in progress the old one is
    closed as not confirmed instead.
    """
    pregnancy = await uow.pregnancies.get(pregnancy_id)
    if not pregnancy:
        return
    others = await uow.pregnancies.list(
        sow_id=pregnancy.sow_id, status=PregnancyStatus.IN_PROGRESS.value
    )
    if any(p.id != pregnancy.id for p in others):
        pregnancy.status = PregnancyStatus.NOT_CONFIRMED.value
        pregnancy.confirmed = False
        pregnancy.confirmation_date = None
        pregnancy.confirmation_method = None
    else:
        pregnancy.status = PregnancyStatus.IN_PROGRESS.value
    pregnancy.updated_by = actor
    pregnancy.bump_version()
    await uow.pregnancies.update(pregnancy)

    service = await uow.services.get(pregnancy.service_id)
    if service:
        success = True if pregnancy.confirmed else None
        if service.success is not success:
            service.success = success
            service.updated_by = actor
            service.bump_version()
            await uow.services.update(service)


async def execute(uow: UnitOfWork, birth_id: UUID, actor: str | None = None) -> None:
    birth = await uow.births.get(birth_id)
    if not birth:
        raise NotFound("Birth not found")
    piglets = await uow.piglets.count_for_birth(birth_id)
    if piglets:
        raise HasDependentsError(
            f"Birth has {piglets} piglet record(s); delete them first", dependent="piglet"
        )
    sow = await uow.sows.get(birth.sow_id)
    if not sow:
        raise NotFound("Sow not found")

    await uow.births.delete(birth_id)
    await reopen_pregnancy(uow, birth.pregnancy_id, actor)
    await refresh_sow_state(uow, birth.sow_id, expected_version=sow.version, actor=actor)
    logger.info("Birth %s of sow %s deleted", birth_id, sow.ear_tag)
