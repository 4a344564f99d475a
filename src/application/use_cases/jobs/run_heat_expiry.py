"""Nightly sweep that closes heats whose service window passed unused.

A detected heat with no service becomes ``not_serviced`` once its window
(end date, or start date when open-ended) is more than the service window
behind ``today``. Heats that got a service in the meantime are left alone.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state
from src.domain.services.reproductive_rules import DEFAULT_PERIODS, ReproductivePeriods

logger = logging.getLogger(__name__)

SYSTEM_ACTOR = "system"


@dataclass(slots=True)
class HeatExpiryResult:
    updated_count: int = 0
    details: list[dict[str, Any]] = field(default_factory=list)


async def execute(
    uow_factory: Callable[[], UnitOfWork],
    *,
    today: date,
    periods: ReproductivePeriods = DEFAULT_PERIODS,
) -> HeatExpiryResult:
    cutoff = today - timedelta(days=periods.service_window_days)
    result = HeatExpiryResult()

    async with uow_factory() as uow:
        candidates = await uow.heats.list_unserviced_before(cutoff)
        touched_sows = []
        for heat in candidates:
            if not await uow.heats.mark_not_serviced(heat.id, SYSTEM_ACTOR):
                continue
            result.updated_count += 1
            result.details.append(
                {
                    "heat_id": str(heat.id),
                    "sow_id": str(heat.sow_id),
                    "heat_date": heat.heat_date.isoformat(),
                    "days_elapsed": (today - heat.window_end).days,
                }
            )
            if heat.sow_id not in touched_sows:
                touched_sows.append(heat.sow_id)
        for sow_id in touched_sows:
            await refresh_sow_state(uow, sow_id, actor=SYSTEM_ACTOR)
        await uow.commit()

    logger.info(
        "Heat expiry: %d heat(s) marked not serviced (cutoff %s)", result.updated_count, cutoff
    )
    return result
