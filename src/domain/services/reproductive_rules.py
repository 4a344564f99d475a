"""Decision rules for registering heats, services and pregnancies.

Every check reads a :class:`SowHistory` snapshot and returns a
:class:`ValidationResult`; nothing here raises or mutates state. All
applicable problems are collected so the caller sees the complete list.
A missing sow, heat or service short-circuits the remaining checks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Sequence

from src.domain.models.heat import Heat, HeatStatus
from src.domain.models.service import Service
from src.domain.services.sow_history import SowHistory

OPEN_HEAT_STATUSES = frozenset({HeatStatus.DETECTED.value, HeatStatus.SERVICED.value})


@dataclass(frozen=True)
class ReproductivePeriods:
    heat_cycle_days: int = 21
    min_heat_interval_days: int = 18
    post_parturition_recovery_days: int = 21
    post_abortion_recovery_days: int = 14
    service_window_days: int = 3
    gestation_period_days: int = 114
    weaning_age_days: int = 21


DEFAULT_PERIODS = ReproductivePeriods()


@dataclass(slots=True)
class ValidationResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "errors": list(self.errors), "warnings": list(self.warnings)}


def _days_between(earlier: date, later: date) -> int:
    return (later - earlier).days


def _check_active(history: SowHistory, result: ValidationResult) -> None:
    if not history.sow.is_active:
        result.errors.append(f"Sow is not active (current status: {history.sow.status})")


def _check_post_farrowing(
    history: SowHistory, on_date: date, periods: ReproductivePeriods, result: ValidationResult
) -> None:
    birth = history.latest_birth(on_or_before=on_date)
    if birth is None:
        return
    days = _days_between(birth.birth_date, on_date)
    if days < periods.post_parturition_recovery_days:
        result.errors.append(
            f"Sow is within the post-farrowing recovery period (farrowed on "
            f"{birth.birth_date.isoformat()}, {days} days ago; minimum is "
            f"{periods.post_parturition_recovery_days} days)"
        )


def _days_since_abortion(history: SowHistory, on_date: date) -> int | None:
    abortion = history.latest_abortion(on_or_before=on_date)
    if abortion is None:
        return None
    return _days_between(abortion.abortion_date, on_date)


def check_heat_registration(
    history: SowHistory | None,
    heat_date: date,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
    *,
    induced: bool = False,
) -> ValidationResult:
    """Can a heat be recorded for this sow on ``heat_date``?

    With ``induced`` the too-short-interval error is downgraded to a warning
    and a reminder to record the induction protocol is added.
    """
    result = ValidationResult()
    if history is None:
        result.errors.append("Sow not found")
        return result

    _check_active(history, result)

    pregnancy = history.confirmed_in_progress()
    if pregnancy is not None:
        result.errors.append(
            "Sow has a confirmed pregnancy in progress (expected farrowing: "
            f"{pregnancy.expected_farrowing_date.isoformat()})"
        )

    _check_post_farrowing(history, heat_date, periods, result)

    last_heat = history.latest_heat(OPEN_HEAT_STATUSES, on_or_before=heat_date)
    if last_heat is not None:
        interval = _days_between(last_heat.heat_date, heat_date)
        if interval < periods.min_heat_interval_days:
            message = (
                f"Interval since the last heat is too short ({interval} days; "
                f"minimum is {periods.min_heat_interval_days} days)"
            )
            if induced:
                result.warnings.append(message)
            else:
                result.errors.append(message)
        elif interval < periods.heat_cycle_days:
            result.warnings.append(
                f"Interval since the last heat ({interval} days) is shorter than the "
                f"expected {periods.heat_cycle_days}-day cycle; verify the date"
            )

    days = _days_since_abortion(history, heat_date)
    if days is not None and days < periods.post_abortion_recovery_days:
        result.errors.append(
            f"Sow is within the post-abortion recovery period ({days} days elapsed; "
            f"minimum is {periods.post_abortion_recovery_days} days)"
        )

    if induced:
        result.warnings.append("Induced heat: record the hormonal protocol that was applied")
    return result


def check_induced_heat_registration(
    history: SowHistory | None,
    heat_date: date,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
) -> ValidationResult:
    return check_heat_registration(history, heat_date, periods, induced=True)


def check_service_registration(
    history: SowHistory | None,
    heat: Heat | None,
    heat_services: Sequence[Service],
    service_date: date,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
) -> ValidationResult:
    """Can a service on ``heat`` be recorded on ``service_date``?

    ``heat_services`` are the services already recorded for that heat.
    """
    result = ValidationResult()
    if history is None:
        result.errors.append("Sow not found")
        return result

    _check_active(history, result)

    if heat is None:
        result.errors.append("Heat not found")
        return result
    if heat.sow_id != history.sow.id:
        result.errors.append("Heat does not belong to this sow")

    if heat.status == HeatStatus.SERVICED.value and heat_services:
        last_service = max(heat_services, key=lambda s: (s.service_date, s.created_at))
        elapsed = _days_between(last_service.service_date, service_date)
        if elapsed > periods.service_window_days:
            result.errors.append(
                f"Heat was already serviced {elapsed} days ago; additional services must "
                f"fall within {periods.service_window_days} days"
            )
        else:
            result.warnings.append(
                f"Additional service for the same heat (service #{len(heat_services) + 1})"
            )

    if heat.status in (HeatStatus.NOT_SERVICED.value, HeatStatus.CANCELLED.value):
        result.warnings.append(
            f"Heat has status '{heat.status}'; verify that a service should be recorded"
        )

    if history.confirmed_in_progress() is not None:
        result.errors.append("Sow already has a confirmed pregnancy in progress")

    _check_post_farrowing(history, service_date, periods, result)
    return result


def check_pregnancy_registration(
    history: SowHistory | None,
    service: Service | None,
    service_has_pregnancy: bool,
    conception_date: date,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
) -> ValidationResult:
    result = ValidationResult()
    if history is None:
        result.errors.append("Sow not found")
        return result

    _check_active(history, result)

    # Any in-progress pregnancy blocks a new one, confirmed or not
    in_progress = history.in_progress_pregnancies()
    if in_progress:
        pregnancy = in_progress[0]
        state = "confirmed" if pregnancy.confirmed else "pending confirmation"
        result.errors.append(
            f"Sow already has a pregnancy in progress ({state}, expected farrowing "
            f"{pregnancy.expected_farrowing_date.isoformat()})"
        )

    _check_post_farrowing(history, conception_date, periods, result)

    if service is None:
        result.errors.append("Service not found")
        return result
    if service.sow_id != history.sow.id:
        result.errors.append("Service does not belong to this sow")
    if service_has_pregnancy:
        result.warnings.append("This service already has a pregnancy recorded")

    days = _days_since_abortion(history, conception_date)
    if days is not None and days < periods.post_abortion_recovery_days:
        result.warnings.append(
            f"Pregnancy recorded shortly after an abortion ({days} days; recommended "
            f"{periods.post_abortion_recovery_days}+ days)"
        )
    return result
