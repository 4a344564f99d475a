from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import UUID

from src.application.errors import ConflictError, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.sow import AnimalStatus, Sow

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, sow_id: UUID, actor: str | None = None) -> Sow:
    """Discard a sow. Its history stays; new registrations are rejected."""
    sow = await uow.sows.get(sow_id)
    if not sow:
        raise NotFound("Sow not found")
    if not sow.is_active:
        return sow
    updated = await uow.sows.update(
        sow_id,
        {
            "status": AnimalStatus.DISCARDED.value,
            "updated_at": datetime.now(timezone.utc),
            "updated_by": actor,
        },
        expected_version=sow.version,
    )
    if not updated:
        raise ConflictError("Version conflict")
    logger.info("Sow %s discarded", sow.ear_tag)
    return updated
