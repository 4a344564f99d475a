from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class AnimalStatus(str, Enum):
    ACTIVE = "active"
    DISCARDED = "discarded"


class ReproductiveStatus(str, Enum):
    EMPTY = "empty"
    IN_HEAT = "in_heat"
    IN_SERVICE = "in_service"
    PREGNANT = "pregnant"
    LACTATING = "lactating"


@dataclass(slots=True)
class Sow:
    id: UUID
    ear_tag: str
    alias: str | None = None
    breed: str | None = None
    birth_date: date | None = None
    status: str = AnimalStatus.ACTIVE.value

    # Projection of the reproductive history; only written by the sow refresh
    reproductive_status: str = ReproductiveStatus.EMPTY.value
    expected_farrowing_date: date | None = None
    parity_count: int = 0
    total_piglets_born: int = 0
    total_piglets_alive: int = 0
    total_piglets_dead: int = 0
    total_abortions: int = 0
    last_farrowing_date: date | None = None
    last_weaning_date: date | None = None

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
        alias: str | None = None,
        breed: str | None = None,
        birth_date: date | None = None,
        notes: str | None = None,
        created_by: str | None = None,
    ) -> Sow:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            ear_tag=ear_tag,
            alias=alias,
            breed=breed,
            birth_date=birth_date,
            status=AnimalStatus.ACTIVE.value,
            reproductive_status=ReproductiveStatus.EMPTY.value,
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
