from __future__ import annotations

import logging
from datetime import timedelta

from zoneinfo import ZoneInfo

from src.application.events.dispatcher import dispatch_events
from src.application.use_cases.jobs import run_heat_expiry, run_weaning
from src.application.use_cases.notifications import generate_notifications
from src.config.settings import Settings
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.infrastructure.scheduler.runner import DailyAt, Every, ScheduledTask, TaskScheduler
from src.utils.datetime_tz import now_local, today_local

logger = logging.getLogger(__name__)


async def expire_unserviced_heats(session_factory, settings: Settings) -> None:
    tz = ZoneInfo(settings.scheduler_timezone)
    result = await run_heat_expiry.execute(
        lambda: SQLAlchemyUnitOfWork(session_factory),
        today=today_local(tz),
        periods=settings.reproductive_periods(),
    )
    for item in result.details:
        logger.debug("Heat %s of sow %s expired", item["heat_id"], item["sow_id"])


async def wean_due_litters(session_factory, settings: Settings) -> None:
    tz = ZoneInfo(settings.scheduler_timezone)
    result = await run_weaning.execute(
        lambda: SQLAlchemyUnitOfWork(session_factory), today=today_local(tz)
    )
    await dispatch_events(session_factory, result.events)


async def generate_reminders(session_factory, settings: Settings) -> None:
    tz = ZoneInfo(settings.scheduler_timezone)
    async with SQLAlchemyUnitOfWork(session_factory) as uow:
        await generate_notifications.execute(
            uow,
            today=today_local(tz),
            now=now_local(tz),
            farrowing_alert_days=settings.farrowing_alert_days,
            confirmation_due_days=settings.pregnancy_confirmation_due_days,
            retention_days=settings.notification_retention_days,
        )
        await uow.commit()


def build_scheduler(session_factory, settings: Settings) -> TaskScheduler:
    tasks = [
        ScheduledTask(
            name="heat_expiry",
            trigger=DailyAt.parse(settings.heat_expiry_run_at),
            action=lambda: expire_unserviced_heats(session_factory, settings),
        ),
        ScheduledTask(
            name="automatic_weaning",
            trigger=DailyAt.parse(settings.weaning_run_at),
            action=lambda: wean_due_litters(session_factory, settings),
        ),
        ScheduledTask(
            name="notifications",
            trigger=Every(timedelta(hours=settings.notifications_interval_hours)),
            action=lambda: generate_reminders(session_factory, settings),
        ),
    ]
    return TaskScheduler(tasks, tz=ZoneInfo(settings.scheduler_timezone))
