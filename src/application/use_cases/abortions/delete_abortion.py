from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.application.use_cases.births.delete_birth import reopen_pregnancy

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, abortion_id: UUID, actor: str | None = None) -> None:
    abortion = await uow.abortions.get(abortion_id)
    if not abortion:
        raise NotFound("Abortion not found")
    sow = await uow.sows.get(abortion.sow_id)
    if not sow:
        raise NotFound("Sow not found")

    await uow.abortions.delete(abortion_id)
    await reopen_pregnancy(uow, abortion.pregnancy_id, actor)
    await refresh_sow_state(uow, abortion.sow_id, expected_version=sow.version, actor=actor)
    logger.info("Abortion %s of sow %s deleted", abortion_id, sow.ear_tag)
