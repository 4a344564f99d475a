"""Periodic reminders derived from the reproductive calendar.

Each reminder type is de-duplicated against notifications already stored
for the same record, so the generator can run every few hours.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.notifications.factory import BuiltNotification, build_notification
from src.application.notifications.types import NotificationType
from src.domain.models.notification import Notification

logger = logging.getLogger(__name__)

FARROWING_DEDUPE = timedelta(days=3)
HEAT_DEDUPE = timedelta(hours=12)
CONFIRMATION_DEDUPE = timedelta(days=7)
# Unserviced heats are reminded from the day after detection until day 4
HEAT_REMINDER_MIN_DAYS = 1
HEAT_REMINDER_MAX_DAYS = 4


@dataclass(slots=True)
class GenerateNotificationsResult:
    farrowing_soon: int = 0
    heat_not_serviced: int = 0
    pregnancy_confirmation_due: int = 0
    cleaned_up: int = 0


def _notification(built: BuiltNotification, related_id, expires_at=None) -> Notification:
    return Notification.create(
        type=built.type,
        title=built.title,
        message=built.message,
        priority=built.priority,
        related_id=related_id,
        data=built.data,
        expires_at=expires_at,
    )


async def execute(
    uow: UnitOfWork,
    *,
    today: date,
    now: datetime | None = None,
    farrowing_alert_days: int = 7,
    confirmation_due_days: int = 21,
    retention_days: int = 30,
) -> GenerateNotificationsResult:
    now = now or datetime.now(timezone.utc)
    result = GenerateNotificationsResult()

    # Upcoming farrowings of confirmed pregnancies
    for pregnancy in await uow.pregnancies.list_farrowing_between(
        today, today + timedelta(days=farrowing_alert_days)
    ):
        if await uow.notifications.exists_since(
            NotificationType.FARROWING_SOON, pregnancy.id, now - FARROWING_DEDUPE, unread_only=True
        ):
            continue
        sow = await uow.sows.get(pregnancy.sow_id)
        if not sow or not sow.is_active:
            continue
        built = build_notification(
            NotificationType.FARROWING_SOON,
            sow_id=sow.id,
            ear_tag=sow.ear_tag,
            alias=sow.alias,
            pregnancy_id=pregnancy.id,
            expected_farrowing_date=pregnancy.expected_farrowing_date,
            days_until=(pregnancy.expected_farrowing_date - today).days,
        )
        expires_at = datetime.combine(
            pregnancy.expected_farrowing_date + timedelta(days=2), time(0, 0), tzinfo=timezone.utc
        )
        await uow.notifications.add(_notification(built, pregnancy.id, expires_at))
        result.farrowing_soon += 1

    # Heats still waiting for a service
    for heat in await uow.heats.list_detected_between(
        today - timedelta(days=HEAT_REMINDER_MAX_DAYS),
        today - timedelta(days=HEAT_REMINDER_MIN_DAYS),
    ):
        if await uow.notifications.exists_since(
            NotificationType.HEAT_NOT_SERVICED, heat.id, now - HEAT_DEDUPE
        ):
            continue
        sow = await uow.sows.get(heat.sow_id)
        if not sow or not sow.is_active:
            continue
        built = build_notification(
            NotificationType.HEAT_NOT_SERVICED,
            sow_id=sow.id,
            ear_tag=sow.ear_tag,
            alias=sow.alias,
            heat_id=heat.id,
            heat_date=heat.heat_date,
            days_since=(today - heat.heat_date).days,
        )
        await uow.notifications.add(_notification(built, heat.id))
        result.heat_not_serviced += 1

    # Pregnancies old enough to be checked
    for pregnancy in await uow.pregnancies.list_unconfirmed_conceived_before(
        today - timedelta(days=confirmation_due_days)
    ):
        if await uow.notifications.exists_since(
            NotificationType.PREGNANCY_CONFIRMATION_DUE,
            pregnancy.id,
            now - CONFIRMATION_DEDUPE,
            unread_only=True,
        ):
            continue
        sow = await uow.sows.get(pregnancy.sow_id)
        if not sow or not sow.is_active:
            continue
        built = build_notification(
            NotificationType.PREGNANCY_CONFIRMATION_DUE,
            sow_id=sow.id,
            ear_tag=sow.ear_tag,
            alias=sow.alias,
            pregnancy_id=pregnancy.id,
            days_since=(today - pregnancy.conception_date).days,
        )
        await uow.notifications.add(_notification(built, pregnancy.id))
        result.pregnancy_confirmation_due += 1

    result.cleaned_up = await uow.notifications.delete_read_before(
        now - timedelta(days=retention_days)
    )
    result.cleaned_up += await uow.notifications.delete_expired(now)

    logger.info(
        "Notifications generated: farrowing=%d heat=%d confirmation=%d cleaned=%d",
        result.farrowing_soon,
        result.heat_not_serviced,
        result.pregnancy_confirmation_due,
        result.cleaned_up,
    )
    return result
