from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.pregnancy import Pregnancy


class PregnanciesRepository(Protocol):
    async def add(self, pregnancy: Pregnancy) -> Pregnancy: ...

    async def get(self, pregnancy_id: UUID) -> Pregnancy | None: ...

    async def update(self, pregnancy: Pregnancy) -> Pregnancy: ...

    async def delete(self, pregnancy_id: UUID) -> None: ...

    async def list(
        self,
        *,
        sow_id: UUID | None = None,
        status: str | None = None,
        confirmed: bool | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Pregnancy]: ...

    async def list_for_sow(self, sow_id: UUID) -> list[Pregnancy]: ...

    async def list_for_service(self, service_id: UUID) -> list[Pregnancy]: ...

    async def list_farrowing_between(self, start: date, end: date) -> list[Pregnancy]: ...

    async def list_unconfirmed_conceived_before(self, cutoff: date) -> list[Pregnancy]: ...
