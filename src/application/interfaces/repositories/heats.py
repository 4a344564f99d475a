from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.heat import Heat


class HeatsRepository(Protocol):
    async def add(self, heat: Heat) -> Heat: ...

    async def get(self, heat_id: UUID) -> Heat | None: ...

    async def update(self, heat: Heat) -> Heat: ...

    async def delete(self, heat_id: UUID) -> None: ...

    async def list(
        self,
        *,
        sow_id: UUID | None = None,
        status: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Heat]: ...

    async def list_for_sow(self, sow_id: UUID) -> list[Heat]: ...

    async def list_unserviced_before(self, cutoff: date) -> list[Heat]: ...

    async def mark_not_serviced(self, heat_id: UUID, updated_by: str | None = None) -> bool: ...

    async def list_detected_between(self, start: date, end: date) -> list[Heat]: ...
