from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state


async def execute(uow: UnitOfWork, piglet_id: UUID, actor: str | None = None) -> None:
    piglet = await uow.piglets.get(piglet_id)
    if not piglet:
        raise NotFound("Piglet not found")
    await uow.piglets.delete(piglet_id)
    await refresh_sow_state(uow, piglet.sow_id, actor=actor)
