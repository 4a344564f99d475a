from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.boar import Boar


class BoarsRepository(Protocol):
    async def add(self, boar: Boar) -> Boar: ...

    async def get(self, boar_id: UUID) -> Boar | None: ...

    async def list(self, *, status: str | None = None) -> list[Boar]: ...

    async def update(self, boar: Boar) -> Boar: ...
