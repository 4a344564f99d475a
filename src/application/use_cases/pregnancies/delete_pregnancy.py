from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import HasDependentsError, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, pregnancy_id: UUID, actor: str | None = None) -> None:
    pregnancy = await uow.pregnancies.get(pregnancy_id)
    if not pregnancy:
        raise NotFound("Pregnancy not found")
    if await uow.births.get_by_pregnancy(pregnancy_id):
        raise HasDependentsError(
            "Pregnancy has a birth recorded; delete the birth first", dependent="birth"
        )
    if await uow.abortions.get_by_pregnancy(pregnancy_id):
        raise HasDependentsError(
            "Pregnancy has an abortion recorded; delete the abortion first",
            dependent="abortion",
        )
    sow = await uow.sows.get(pregnancy.sow_id)
    if not sow:
        raise NotFound("Sow not found")

    service = await uow.services.get(pregnancy.service_id)
    if service and pregnancy.confirmed:
        service.success = False
        service.updated_by = actor
        service.bump_version()
        await uow.services.update(service)

    await uow.pregnancies.delete(pregnancy_id)
    await refresh_sow_state(uow, pregnancy.sow_id, expected_version=sow.version, actor=actor)
    logger.info("Pregnancy %s of sow %s deleted", pregnancy_id, sow.ear_tag)
