"""Keeps each sow's cached reproductive state in step with its records.

Every write that touches heats, services, pregnancies, births, abortions or
piglets ends by calling :func:`refresh_sow_state` inside the same unit of
work, so the sow row and the source rows commit together. The sow update is
conditional on the version read before validation; a concurrent writer that
got there first makes it fail with :class:`ConflictError`.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import UUID

from src.application.errors import ConflictError, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.sow import Sow
from src.domain.services.sow_history import SowHistory
from src.domain.services.sow_projection import project_sow

logger = logging.getLogger(__name__)


async def load_sow_history(uow: UnitOfWork, sow_id: UUID) -> SowHistory | None:
    sow = await uow.sows.get(sow_id)
    if sow is None:
        return None
    return SowHistory(
        sow=sow,
        heats=await uow.heats.list_for_sow(sow_id),
        services=await uow.services.list_for_sow(sow_id),
        pregnancies=await uow.pregnancies.list_for_sow(sow_id),
        births=await uow.births.list_for_sow(sow_id),
        abortions=await uow.abortions.list_for_sow(sow_id),
        piglets=await uow.piglets.list_for_sow(sow_id),
    )


async def require_sow_history(uow: UnitOfWork, sow_id: UUID) -> SowHistory:
    history = await load_sow_history(uow, sow_id)
    if history is None:
        raise NotFound(f"Sow {sow_id} not found")
    return history


async def refresh_sow_state(
    uow: UnitOfWork,
    sow_id: UUID,
    *,
    expected_version: int | None = None,
    actor: str | None = None,
) -> Sow:
    """Recompute the sow projection from source rows and persist it.

    When ``expected_version`` is given the sow row is always rewritten with
    that version as the precondition, even if nothing changed, so two
    overlapping registrations for the same sow cannot both commit.
    """
    history = await require_sow_history(uow, sow_id)
    sow = history.sow
    projection = project_sow(history)
    if expected_version is None:
        if not projection.differs_from(sow):
            return sow
        expected_version = sow.version

    data = projection.as_values()
    data["updated_at"] = datetime.now(timezone.utc)
    if actor:
        data["updated_by"] = actor
    updated = await uow.sows.update(sow_id, data, expected_version=expected_version)
    if updated is None:
        raise ConflictError(
            "Sow was modified by another operation; reload and retry",
            details={"sow_id": str(sow_id)},
        )
    if updated.reproductive_status != sow.reproductive_status:
        logger.info(
            "Sow %s reproductive status %s -> %s",
            sow.ear_tag,
            sow.reproductive_status,
            updated.reproductive_status,
        )
    return updated
