"""Daily automatic weaning of litters whose expected weaning date has arrived.

Each litter is weaned in its own transaction; one failing litter is logged
and skipped without affecting the others.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.births import wean_litter
from src.application.use_cases.jobs.run_heat_expiry import SYSTEM_ACTOR

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WeaningResult:
    processed_litters: int = 0
    piglets_weaned: int = 0
    failures: list[dict[str, Any]] = field(default_factory=list)
    # Events of the committed litters, for post-commit dispatch
    events: list = field(default_factory=list)


async def execute(uow_factory: Callable[[], UnitOfWork], *, today: date) -> WeaningResult:
    result = WeaningResult()
    async with uow_factory() as uow:
        due = await uow.births.list_due_for_weaning(today)

    for birth in due:
        try:
            async with uow_factory() as uow:
                outcome = await wean_litter.execute(uow, birth.id, actor=SYSTEM_ACTOR)
                await uow.commit()
                result.events.extend(uow.drain_events())
        except Exception as exc:
            logger.error("Automatic weaning failed for birth %s: %s", birth.id, exc, exc_info=True)
            result.failures.append({"birth_id": str(birth.id), "error": str(exc)})
            continue
        if outcome.piglets_weaned:
            result.processed_litters += 1
            result.piglets_weaned += outcome.piglets_weaned

    logger.info(
        "Automatic weaning: %d litter(s), %d piglet(s), %d failure(s)",
        result.processed_litters,
        result.piglets_weaned,
        len(result.failures),
    )
    return result
