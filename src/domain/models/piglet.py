from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class PigletBirthStatus(str, Enum):
    ALIVE = "alive"
    DEAD = "dead"
    MUMMIFIED = "mummified"


class PigletStatus(str, Enum):
    LACTATING = "lactating"
    WEANED = "weaned"
    SOLD = "sold"
    DEAD = "dead"


PIGLET_TRANSITIONS: dict[str, set[str]] = {
    PigletStatus.LACTATING.value: {
        PigletStatus.WEANED.value,
        PigletStatus.SOLD.value,
        PigletStatus.DEAD.value,
    },
    PigletStatus.WEANED.value: {PigletStatus.SOLD.value, PigletStatus.DEAD.value},
}


@dataclass(slots=True)
class Piglet:
    id: UUID
    birth_id: UUID
    sow_id: UUID
    birth_status: str
    current_status: str
    ear_tag: str | None = None
    sex: str | None = None
    birth_weight_kg: Decimal | None = None
    weaning_date: date | None = None
    weaning_weight_kg: Decimal | None = None
    exit_date: date | None = None
    notes: str | None = None
    created_by: str | None = None
    updated_by: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        birth_id: UUID,
        sow_id: UUID,
        birth_status: str,
        ear_tag: str | None = None,
        sex: str | None = None,
        birth_weight_kg: Decimal | None = None,
        notes: str | None = None,
        created_by: str | None = None,
    ) -> Piglet:
        now = datetime.now(timezone.utc)
        if birth_status == PigletBirthStatus.ALIVE.value:
            current_status = PigletStatus.LACTATING.value
        else:
            current_status = PigletStatus.DEAD.value
        return cls(
            id=uuid4(),
            birth_id=birth_id,
            sow_id=sow_id,
            birth_status=birth_status,
            current_status=current_status,
            ear_tag=ear_tag,
            sex=sex,
            birth_weight_kg=birth_weight_kg,
            notes=notes,
            created_by=created_by,
            updated_by=created_by,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def is_nursing(self) -> bool:
        return (
            self.birth_status == PigletBirthStatus.ALIVE.value
            and self.current_status == PigletStatus.LACTATING.value
        )

    def wean(self, weaning_date: date) -> None:
        self.current_status = PigletStatus.WEANED.value
        self.weaning_date = weaning_date
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
