from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.service import Service


class ServicesRepository(Protocol):
    async def add(self, service: Service) -> Service: ...

    async def get(self, service_id: UUID) -> Service | None: ...

    async def update(self, service: Service) -> Service: ...

    async def delete(self, service_id: UUID) -> None: ...

    async def list(
        self,
        *,
        sow_id: UUID | None = None,
        heat_id: UUID | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Service]: ...

    async def list_for_sow(self, sow_id: UUID) -> list[Service]: ...

    async def list_for_heat(self, heat_id: UUID) -> list[Service]: ...
