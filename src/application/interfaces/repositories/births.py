from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.birth import Birth


class BirthsRepository(Protocol):
    async def add(self, birth: Birth) -> Birth: ...

    async def get(self, birth_id: UUID) -> Birth | None: ...

    async def get_by_pregnancy(self, pregnancy_id: UUID) -> Birth | None: ...

    async def update(self, birth: Birth) -> Birth: ...

    async def delete(self, birth_id: UUID) -> None: ...

    async def list(
        self,
        *,
        sow_id: UUID | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Birth]: ...

    async def list_for_sow(self, sow_id: UUID) -> list[Birth]: ...

    async def list_due_for_weaning(self, today: date) -> list[Birth]: ...
