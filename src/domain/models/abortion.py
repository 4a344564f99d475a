from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from uuid import UUID, uuid4

ABORTION_GESTATION_MIN_DAYS = 1
ABORTION_GESTATION_MAX_DAYS = 113


@dataclass(slots=True)
class Abortion:
    id: UUID
    sow_id: UUID
    pregnancy_id: UUID
    abortion_date: date
    gestation_days: int
    recovery_until: date
    fetuses_expelled: int | None = None
    suspected_cause: str | None = None
    veterinary_treatment: str | None = None
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
        abortion_date: date,
        gestation_days: int,
        recovery_days: int,
        fetuses_expelled: int | None = None,
        suspected_cause: str | None = None,
        veterinary_treatment: str | None = None,
        notes: str | None = None,
        created_by: str | None = None,
    ) -> Abortion:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            sow_id=sow_id,
            pregnancy_id=pregnancy_id,
            abortion_date=abortion_date,
            gestation_days=gestation_days,
            recovery_until=abortion_date + timedelta(days=recovery_days),
            fetuses_expelled=fetuses_expelled,
            suspected_cause=suspected_cause,
            veterinary_treatment=veterinary_treatment,
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
