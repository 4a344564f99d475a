from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.piglet import Piglet


class PigletsRepository(Protocol):
    async def add(self, piglet: Piglet) -> Piglet: ...

    async def add_many(self, piglets: list[Piglet]) -> list[Piglet]: ...

    async def get(self, piglet_id: UUID) -> Piglet | None: ...

    async def update(self, piglet: Piglet) -> Piglet: ...

    async def delete(self, piglet_id: UUID) -> None: ...

    async def list_for_birth(self, birth_id: UUID) -> list[Piglet]: ...

    async def list_for_sow(self, sow_id: UUID) -> list[Piglet]: ...

    async def count_for_birth(self, birth_id: UUID, birth_status: str | None = None) -> int: ...
