from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.abortion import Abortion


class AbortionsRepository(Protocol):
    async def add(self, abortion: Abortion) -> Abortion: ...

    async def get(self, abortion_id: UUID) -> Abortion | None: ...

    async def get_by_pregnancy(self, pregnancy_id: UUID) -> Abortion | None: ...

    async def update(self, abortion: Abortion) -> Abortion: ...

    async def delete(self, abortion_id: UUID) -> None: ...

    async def list(
        self,
        *,
        sow_id: UUID | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Abortion]: ...

    async def list_for_sow(self, sow_id: UUID) -> list[Abortion]: ...
