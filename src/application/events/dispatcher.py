from __future__ import annotations

import logging
from typing import Iterable

from src.application.events.models import (
    AbortionRecordedEvent,
    BirthRecordedEvent,
    LitterWeanedEvent,
    PregnancyConfirmedEvent,
)
from src.application.notifications.factory import BuiltNotification, build_notification
from src.application.notifications.types import NotificationType
from src.domain.models.notification import Notification
from src.infrastructure.repos.notifications_sqlalchemy import NotificationsSQLAlchemyRepository

logger = logging.getLogger(__name__)


def _build(event: object) -> tuple[BuiltNotification, object] | None:
    if isinstance(event, PregnancyConfirmedEvent):
        built = build_notification(
            NotificationType.PREGNANCY_CONFIRMED,
            sow_id=event.sow_id,
            ear_tag=event.ear_tag,
            alias=event.alias,
            pregnancy_id=event.pregnancy_id,
            expected_farrowing_date=event.expected_farrowing_date,
        )
        return built, event.pregnancy_id
    if isinstance(event, BirthRecordedEvent):
        built = build_notification(
            NotificationType.BIRTH_RECORDED,
            sow_id=event.sow_id,
            ear_tag=event.ear_tag,
            alias=event.alias,
            birth_id=event.birth_id,
            birth_date=event.birth_date,
            born_alive=event.born_alive,
            total_born=event.total_born,
        )
        return built, event.birth_id
    if isinstance(event, AbortionRecordedEvent):
        built = build_notification(
            NotificationType.ABORTION_RECORDED,
            sow_id=event.sow_id,
            ear_tag=event.ear_tag,
            alias=event.alias,
            abortion_id=event.abortion_id,
            abortion_date=event.abortion_date,
            recovery_until=event.recovery_until,
        )
        return built, event.abortion_id
    if isinstance(event, LitterWeanedEvent):
        built = build_notification(
            NotificationType.LITTER_WEANED,
            sow_id=event.sow_id,
            ear_tag=event.ear_tag,
            alias=event.alias,
            birth_id=event.birth_id,
            weaning_date=event.weaning_date,
            piglets_weaned=event.piglets_weaned,
        )
        return built, event.birth_id
    return None


async def dispatch_events(session_factory, events: Iterable[object]) -> None:
    """
    Dispatch events post-commit. Uses a transient session to store notifications.
    Safe to call in a background task.
    """
    events = list(events)
    if not events:
        return

    async with session_factory() as session:
        repo = NotificationsSQLAlchemyRepository(session)
        for event in events:
            try:
                result = _build(event)
                if result is None:
                    continue
                built, related_id = result
                await repo.add(
                    Notification.create(
                        type=built.type,
                        title=built.title,
                        message=built.message,
                        priority=built.priority,
                        related_id=related_id,
                        data=built.data,
                    )
                )
            except Exception as e:
                logger.error(
                    "Error dispatching event %s: %s", type(event).__name__, e, exc_info=True
                )
        await session.commit()
