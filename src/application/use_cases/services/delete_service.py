from __future__ import annotations

import logging
from uuid import UUID

from src.application.errors import HasDependentsError, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.domain.models.heat import HeatStatus

logger = logging.getLogger(__name__)


async def execute(uow: UnitOfWork, service_id: UUID, actor: str | None = None) -> None:
    service = await uow.services.get(service_id)
    if not service:
        raise NotFound("Service not found")
    if await uow.pregnancies.list_for_service(service_id):
        raise HasDependentsError(
            "Service has a pregnancy recorded; delete the pregnancy first",
            dependent="pregnancy",
        )
    await uow.services.delete(service_id)

    # Keep the remaining services of the heat numbered 1..n in date order
    remaining = await uow.services.list_for_heat(service.heat_id)
    remaining.sort(key=lambda s: (s.service_date, s.created_at))
    for number, other in enumerate(remaining, start=1):
        if other.service_number != number:
            other.service_number = number
            other.updated_by = actor
            other.bump_version()
            await uow.services.update(other)

    heat = await uow.heats.get(service.heat_id)
    if heat and not remaining and heat.status == HeatStatus.SERVICED.value:
        heat.status = HeatStatus.DETECTED.value
        heat.updated_by = actor
        heat.bump_version()
        await uow.heats.update(heat)
        logger.info("Heat %s has no services left; back to detected", heat.id)

    await refresh_sow_state(uow, service.sow_id, actor=actor)
