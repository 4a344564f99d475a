from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4

BIRTH_GESTATION_MIN_DAYS = 110
BIRTH_GESTATION_MAX_DAYS = 120


class BirthType(str, Enum):
    NORMAL = "normal"
    ASSISTED = "assisted"
    CESAREAN = "cesarean"


@dataclass(slots=True)
class Birth:
    id: UUID
    sow_id: UUID
    pregnancy_id: UUID
    birth_date: date
    born_alive: int
    born_dead: int
    mummified: int
    total_born: int
    gestation_days: int
    expected_weaning_date: date
    boar_id: UUID | None = None
    birth_time: time | None = None
    birth_type: str = BirthType.NORMAL.value
    average_weight_kg: Decimal | None = None
    sow_condition: str | None = None
    assisted_by: str | None = None
    notes: str | None = None
    created_by: str | None = None
    updated_by: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        sow_id: UUID,
        pregnancy_id: UUID,
        birth_date: date,
        born_alive: int,
        born_dead: int,
        mummified: int,
        total_born: int,
        gestation_days: int,
        weaning_age_days: int,
        expected_weaning_date: date | None = None,
        boar_id: UUID | None = None,
        birth_time: time | None = None,
        birth_type: str = BirthType.NORMAL.value,
        average_weight_kg: Decimal | None = None,
        sow_condition: str | None = None,
        assisted_by: str | None = None,
        notes: str | None = None,
        created_by: str | None = None,
    ) -> Birth:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            sow_id=sow_id,
            pregnancy_id=pregnancy_id,
            birth_date=birth_date,
            born_alive=born_alive,
            born_dead=born_dead,
            mummified=mummified,
            total_born=total_born,
            gestation_days=gestation_days,
            expected_weaning_date=expected_weaning_date
            or birth_date + timedelta(days=weaning_age_days),
            boar_id=boar_id,
            birth_time=birth_time,
            birth_type=birth_type,
            average_weight_kg=average_weight_kg,
            sow_condition=sow_condition,
            assisted_by=assisted_by,
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
