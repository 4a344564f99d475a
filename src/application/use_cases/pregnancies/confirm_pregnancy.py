from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from src.application.errors import DataInvalidError, ImmutableRecordError, NotFound
from src.application.events.models import PregnancyConfirmedEvent
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.services.sow_state import refresh_sow_state, require_sow_history
from src.application.use_cases.pregnancies.register_pregnancy import validate_confirmation
from src.domain.models.pregnancy import Pregnancy

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ConfirmPregnancyInput:
    confirmation_date: date
    confirmation_method: str


async def execute(
    uow: UnitOfWork,
    pregnancy_id: UUID,
    payload: ConfirmPregnancyInput,
    actor: str | None = None,
) -> Pregnancy:
    pregnancy = await uow.pregnancies.get(pregnancy_id)
    if not pregnancy:
        raise NotFound("Pregnancy not found")
    if pregnancy.is_terminal:
        raise ImmutableRecordError(f"Pregnancy is already closed ({pregnancy.status})")
    if not pregnancy.is_in_progress:
        raise DataInvalidError(
            f"Only pregnancies in progress can be confirmed (current: {pregnancy.status})"
        )
    validate_confirmation(
        pregnancy.conception_date, payload.confirmation_date, payload.confirmation_method
    )

    history = await require_sow_history(uow, pregnancy.sow_id)
    was_confirmed = pregnancy.confirmed
    pregnancy.confirm(payload.confirmation_date, payload.confirmation_method)
    pregnancy.updated_by = actor
    updated = await uow.pregnancies.update(pregnancy)

    service = await uow.services.get(pregnancy.service_id)
    if service and service.success is not True:
        service.success = True
        service.updated_by = actor
        service.bump_version()
        await uow.services.update(service)

    await refresh_sow_state(
        uow, pregnancy.sow_id, expected_version=history.sow.version, actor=actor
    )

    if not was_confirmed:
        uow.add_event(
            PregnancyConfirmedEvent(
                sow_id=history.sow.id,
                pregnancy_id=updated.id,
                expected_farrowing_date=updated.expected_farrowing_date,
                ear_tag=history.sow.ear_tag,
                alias=history.sow.alias,
            )
        )
        logger.info("Pregnancy %s confirmed for sow %s", updated.id, history.sow.ear_tag)
    return updated
