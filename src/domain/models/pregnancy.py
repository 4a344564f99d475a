from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from uuid import UUID, uuid4


class PregnancyStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED_BIRTH = "completed_birth"
    COMPLETED_ABORTION = "completed_abortion"
    NOT_CONFIRMED = "not_confirmed"


class ConfirmationMethod(str, Enum):
    ULTRASOUND = "ultrasound"
    NO_RETURN_TO_HEAT = "no_return_to_heat"
    VISUAL = "visual"
    OTHER = "other"


TERMINAL_PREGNANCY_STATUSES = frozenset(
    {PregnancyStatus.COMPLETED_BIRTH.value, PregnancyStatus.COMPLETED_ABORTION.value}
)


@dataclass(slots=True)
class Pregnancy:
    id: UUID
    sow_id: UUID
    service_id: UUID
    conception_date: date
    expected_farrowing_date: date
    status: str = PregnancyStatus.IN_PROGRESS.value
    confirmed: bool = False
    confirmation_date: date | None = None
    confirmation_method: str | None = None
    ultrasound_count: int = 0
    last_ultrasound_date: date | None = None
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
        service_id: UUID,
        conception_date: date,
        gestation_days: int,
        confirmation_date: date | None = None,
        confirmation_method: str | None = None,
        notes: str | None = None,
        created_by: str | None = None,
    ) -> Pregnancy:
        now = datetime.now(timezone.utc)
        pregnancy = cls(
            id=uuid4(),
            sow_id=sow_id,
            service_id=service_id,
            conception_date=conception_date,
            expected_farrowing_date=conception_date + timedelta(days=gestation_days),
            status=PregnancyStatus.IN_PROGRESS.value,
            confirmed=False,
            notes=notes,
            created_by=created_by,
            updated_by=created_by,
            created_at=now,
            updated_at=now,
            version=1,
        )
        if confirmation_date is not None and confirmation_method is not None:
            pregnancy._set_confirmation(confirmation_date, confirmation_method)
        return pregnancy

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_PREGNANCY_STATUSES

    @property
    def is_in_progress(self) -> bool:
        return self.status == PregnancyStatus.IN_PROGRESS.value

    def _set_confirmation(self, confirmation_date: date, method: str) -> None:
        self.confirmed = True
        self.confirmation_date = confirmation_date
        self.confirmation_method = method
        if method == ConfirmationMethod.ULTRASOUND.value:
            self.ultrasound_count += 1
            self.last_ultrasound_date = confirmation_date

    def confirm(self, confirmation_date: date, method: str) -> None:
        self._set_confirmation(confirmation_date, method)
        self.bump_version()

    def unconfirm(self) -> None:
        self.confirmed = False
        self.confirmation_date = None
        self.confirmation_method = None
        self.bump_version()

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
