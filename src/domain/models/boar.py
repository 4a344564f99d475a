from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from src.domain.models.sow import AnimalStatus


@dataclass(slots=True)
class Boar:
    id: UUID
    ear_tag: str
    name: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    status: str = AnimalStatus.ACTIVE.value
    notes: str | None = None
    created_by: str | None = None
    updated_by: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @property
    def is_active(self) -> bool:
        return self.status == AnimalStatus.ACTIVE.value

    @classmethod
    def create(
        cls,
        ear_tag: str,
        name: str | None = None,
        breed: str | None = None,
        birth_date: date | None = None,
        notes: str | None = None,
        created_by: str | None = None,
    ) -> Boar:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            ear_tag=ear_tag,
            name=name,
            breed=breed,
            birth_date=birth_date,
            notes=notes,
            created_by=created_by,
            updated_by=created_by,
            created_at=now,
            updated_at=now,
            version=1,
        )

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
