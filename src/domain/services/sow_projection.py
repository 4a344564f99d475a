from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any

from src.domain.models.heat import HeatStatus
from src.domain.models.sow import ReproductiveStatus
from src.domain.services.sow_history import SowHistory


@dataclass(frozen=True)
class SowProjection:
    reproductive_status: str
    expected_farrowing_date: date | None
    parity_count: int
    total_piglets_born: int
    total_piglets_alive: int
    total_piglets_dead: int
    total_abortions: int
    last_farrowing_date: date | None
    last_weaning_date: date | None

    def as_values(self) -> dict[str, Any]:
        return asdict(self)

    def differs_from(self, sow) -> bool:
        return any(getattr(sow, name) != value for name, value in self.as_values().items())


def derive_reproductive_status(history: SowHistory) -> ReproductiveStatus:
    """Derive the sow's reproductive state from its source records.

    Precedence: a confirmed in-progress pregnancy, then a nursing litter,
    then the heat of the current cycle (the latest non-cancelled heat after
    the last farrowing or abortion).
    """
    if history.confirmed_in_progress() is not None:
        return ReproductiveStatus.PREGNANT

    latest_birth = history.latest_birth()
    if latest_birth is not None and any(p.is_nursing for p in history.litter_of(latest_birth)):
        return ReproductiveStatus.LACTATING

    boundaries = [b.birth_date for b in history.births] + [
        a.abortion_date for a in history.abortions
    ]
    cycle_start = max(boundaries) if boundaries else None
    candidates = [
        h
        for h in history.heats
        if h.status != HeatStatus.CANCELLED.value
        and (cycle_start is None or h.heat_date > cycle_start)
    ]
    if not candidates:
        return ReproductiveStatus.EMPTY
    heat = max(candidates, key=lambda h: (h.heat_date, h.created_at))

    if heat.status == HeatStatus.DETECTED.value:
        return ReproductiveStatus.IN_HEAT
    if heat.status == HeatStatus.SERVICED.value:
        outcomes = [s.success for s in history.services_for_heat(heat.id)]
        if False in outcomes and True not in outcomes:
            return ReproductiveStatus.EMPTY
        return ReproductiveStatus.IN_SERVICE
    return ReproductiveStatus.EMPTY


def project_sow(history: SowHistory) -> SowProjection:
    confirmed = history.confirmed_in_progress()
    latest_birth = history.latest_birth()
    weaning_dates = [p.weaning_date for p in history.piglets if p.weaning_date is not None]
    return SowProjection(
        reproductive_status=derive_reproductive_status(history).value,
        expected_farrowing_date=confirmed.expected_farrowing_date if confirmed else None,
        parity_count=len(history.births),
        total_piglets_born=sum(b.total_born for b in history.births),
        total_piglets_alive=sum(b.born_alive for b in history.births),
        total_piglets_dead=sum(b.born_dead + b.mummified for b in history.births),
        total_abortions=len(history.abortions),
        last_farrowing_date=latest_birth.birth_date if latest_birth else None,
        last_weaning_date=max(weaning_dates) if weaning_dates else None,
    )
