from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class HeatStatus(str, Enum):
    DETECTED = "detected"
    SERVICED = "serviced"
    NOT_SERVICED = "not_serviced"
    CANCELLED = "cancelled"


class HeatIntensity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Manual transitions; SERVICED is only reached through a Service.
MANUAL_HEAT_TRANSITIONS: dict[str, set[str]] = {
    HeatStatus.DETECTED.value: {HeatStatus.NOT_SERVICED.value, HeatStatus.CANCELLED.value},
    HeatStatus.NOT_SERVICED.value: {HeatStatus.CANCELLED.value},
}


@dataclass(slots=True)
class Heat:
    id: UUID
    sow_id: UUID
    heat_date: date
    heat_end_date: date | None = None
    intensity: str | None = None
    status: str = HeatStatus.DETECTED.value
    induced: bool = False
    induction_protocol: str | None = None
    detected_by: str | None = None
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
        heat_date: date,
        heat_end_date: date | None = None,
        intensity: str | None = None,
        induced: bool = False,
        induction_protocol: str | None = None,
        detected_by: str | None = None,
        notes: str | None = None,
        created_by: str | None = None,
    ) -> Heat:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            sow_id=sow_id,
            heat_date=heat_date,
            heat_end_date=heat_end_date,
            intensity=intensity,
            status=HeatStatus.DETECTED.value,
            induced=induced,
            induction_protocol=induction_protocol,
            detected_by=detected_by,
            notes=notes,
            created_by=created_by,
            updated_by=created_by,
            created_at=now,
            updated_at=now,
            version=1,
        )

    @property
    def window_end(self) -> date:
        return self.heat_end_date or self.heat_date

    def mark_serviced(self) -> None:
        self.status = HeatStatus.SERVICED.value
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
