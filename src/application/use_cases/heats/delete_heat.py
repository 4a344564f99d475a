from __future__ import annotations

from uuid import UUID

from src.application.errors import HasDependentsError, NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state


async def execute(uow: UnitOfWork, heat_id: UUID, actor: str | None = None) -> None:
    heat = await uow.heats.get(heat_id)
    if not heat:
        raise NotFound("Heat not found")
    services = await uow.services.list_for_heat(heat_id)
    if services:
        raise HasDependentsError(
            f"Heat has {len(services)} service(s) recorded; delete them first",
            dependent="service",
        )
    await uow.heats.delete(heat_id)
    await refresh_sow_state(uow, heat.sow_id, actor=actor)
