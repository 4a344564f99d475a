from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class NotificationPriority(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


@dataclass(slots=True)
class Notification:
    id: UUID
    type: str
    title: str
    message: str
    priority: str = NotificationPriority.NORMAL.value
    related_id: UUID | None = None
    data: dict | None = None
    read: bool = False
    expires_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    read_at: datetime | None = None

    @classmethod
    def create(
        cls,
        type: str,
        title: str,
        message: str,
        priority: str = NotificationPriority.NORMAL.value,
        related_id: UUID | None = None,
        data: dict | None = None,
        expires_at: datetime | None = None,
    ) -> Notification:
        return cls(
            id=uuid4(),
            type=type,
            title=title,
            message=message,
            priority=priority,
            related_id=related_id,
            data=data,
            read=False,
            expires_at=expires_at,
            created_at=datetime.now(timezone.utc),
            read_at=None,
        )

    def mark_as_read(self) -> None:
        if not self.read:
            self.read = True
            self.read_at = datetime.now(timezone.utc)
