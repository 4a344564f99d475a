from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4


class ServiceType(str, Enum):
    NATURAL = "natural"
    ARTIFICIAL = "artificial"


NATURAL_ONLY_FIELDS = ("mating_duration_minutes", "mating_quality")
ARTIFICIAL_ONLY_FIELDS = ("semen_batch", "semen_dose", "semen_volume_ml", "technician")


@dataclass(slots=True)
class Service:
    id: UUID
    sow_id: UUID
    heat_id: UUID
    service_date: date
    service_type: str
    boar_id: UUID | None = None
    service_time: time | None = None
    service_number: int = 1

    # natural mating
    mating_duration_minutes: int | None = None
    mating_quality: str | None = None
    # artificial insemination
    semen_batch: str | None = None
    semen_dose: str | None = None
    semen_volume_ml: Decimal | None = None
    technician: str | None = None

    # Outcome of the attempt; None until a pregnancy from it is confirmed or dropped
    success: bool | None = None
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
        heat_id: UUID,
        service_date: date,
        service_type: str,
        service_number: int = 1,
        boar_id: UUID | None = None,
        service_time: time | None = None,
        mating_duration_minutes: int | None = None,
        mating_quality: str | None = None,
        semen_batch: str | None = None,
        semen_dose: str | None = None,
        semen_volume_ml: Decimal | None = None,
        technician: str | None = None,
        notes: str | None = None,
        created_by: str | None = None,
    ) -> Service:
        now = datetime.now(timezone.utc)
        service = cls(
            id=uuid4(),
            sow_id=sow_id,
            heat_id=heat_id,
            service_date=service_date,
            service_type=service_type,
            service_number=service_number,
            boar_id=boar_id,
            service_time=service_time,
            mating_duration_minutes=mating_duration_minutes,
            mating_quality=mating_quality,
            semen_batch=semen_batch,
            semen_dose=semen_dose,
            semen_volume_ml=semen_volume_ml,
            technician=technician,
            notes=notes,
            created_by=created_by,
            updated_by=created_by,
            created_at=now,
            updated_at=now,
            version=1,
        )
        service.clear_foreign_type_fields()
        return service

    def clear_foreign_type_fields(self) -> None:
        """Natural and artificial details are mutually exclusive."""
        if self.service_type == ServiceType.NATURAL.value:
            cleared = ARTIFICIAL_ONLY_FIELDS
        else:
            cleared = NATURAL_ONLY_FIELDS
        for name in cleared:
            setattr(self, name, None)

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
