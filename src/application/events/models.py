from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class PregnancyConfirmedEvent:
    sow_id: UUID
    pregnancy_id: UUID
    expected_farrowing_date: date
    ear_tag: str
    alias: str | None = None


@dataclass(frozen=True)
class BirthRecordedEvent:
    sow_id: UUID
    birth_id: UUID
    birth_date: date
    born_alive: int
    total_born: int
    ear_tag: str
    alias: str | None = None


@dataclass(frozen=True)
class AbortionRecordedEvent:
    sow_id: UUID
    abortion_id: UUID
    abortion_date: date
    recovery_until: date
    ear_tag: str
    alias: str | None = None


@dataclass(frozen=True)
class LitterWeanedEvent:
    sow_id: UUID
    birth_id: UUID
    weaning_date: date
    piglets_weaned: int
    ear_tag: str
    alias: str | None = None
