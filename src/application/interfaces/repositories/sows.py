from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.sow import Sow


class SowsRepository(Protocol):
    async def add(self, sow: Sow) -> Sow: ...

    async def get(self, sow_id: UUID) -> Sow | None: ...

    async def list(
        self,
        *,
        status: str | None = None,
        reproductive_status: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Sow]: ...

    async def count(
        self,
        *,
        status: str | None = None,
        reproductive_status: str | None = None,
    ) -> int: ...

    async def update(self, sow_id: UUID, data: dict, expected_version: int) -> Sow | None: ...
