from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.sow import AnimalStatus, ReproductiveStatus, Sow


@dataclass(slots=True)
class ListSowsResult:
    items: list[Sow]
    total: int


async def execute(
    uow: UnitOfWork,
    *,
    status: str | None = None,
    reproductive_status: str | None = None,
    limit: int = 50,
    offset: int = 0,
) -> ListSowsResult:
    if status and status not in {s.value for s in AnimalStatus}:
        raise ValidationError(f"Unknown status '{status}'")
    if reproductive_status and reproductive_status not in {s.value for s in ReproductiveStatus}:
        raise ValidationError(f"Unknown reproductive status '{reproductive_status}'")
    items = await uow.sows.list(
        status=status, reproductive_status=reproductive_status, limit=limit, offset=offset
    )
    total = await uow.sows.count(status=status, reproductive_status=reproductive_status)
    return ListSowsResult(items=items, total=total)
