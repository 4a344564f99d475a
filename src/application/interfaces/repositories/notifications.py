from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.models.notification import Notification


class NotificationsRepository(Protocol):
    async def add(self, notification: Notification) -> Notification: ...

    async def get(self, notification_id: UUID) -> Notification | None: ...

    async def list(
        self,
        *,
        unread_only: bool = False,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Notification]: ...

    async def count_unread(self) -> int: ...

    async def mark_as_read(self, notification_ids: list[UUID]) -> int: ...

    async def mark_all_as_read(self) -> int: ...

    async def exists_since(
        self,
        type: str,
        related_id: UUID,
        since: datetime,
        *,
        unread_only: bool = False,
    ) -> bool: ...

    async def delete_read_before(self, cutoff: datetime) -> int: ...

    async def delete_expired(self, now: datetime) -> int: ...
