"""In-process scheduler for the periodic reproduction jobs.

Tasks run one after another on a single asyncio task, so two jobs never
overlap. A failing task is logged and rescheduled like a successful one.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Any, Protocol

from zoneinfo import ZoneInfo

from src.utils.datetime_tz import now_local

logger = logging.getLogger(__name__)


class Trigger(Protocol):
    def first_run(self, now: datetime) -> datetime: ...

    def next_after(self, now: datetime) -> datetime: ...


@dataclass(frozen=True)
class DailyAt:
    at: time

    @classmethod
    def parse(cls, value: str) -> DailyAt:
        hours, _, minutes = value.partition(":")
        return cls(time(int(hours), int(minutes)))

    def next_after(self, now: datetime) -> datetime:
        # Built from the calendar day so the wall-clock time survives DST changes
        day = now.date()
        candidate = datetime.combine(day, self.at, tzinfo=now.tzinfo)
        if candidate <= now:
            candidate = datetime.combine(day + timedelta(days=1), self.at, tzinfo=now.tzinfo)
        return candidate

    def first_run(self, now: datetime) -> datetime:
        return self.next_after(now)


@dataclass(frozen=True)
class Every:
    interval: timedelta

    def next_after(self, now: datetime) -> datetime:
        return now + self.interval

    def first_run(self, now: datetime) -> datetime:
        return now


@dataclass
class ScheduledTask:
    name: str
    trigger: Trigger
    action: Callable[[], Awaitable[Any]]
    next_run: datetime | None = None


class TaskScheduler:
    def __init__(
        self,
        tasks: list[ScheduledTask],
        *,
        tz: ZoneInfo,
        clock: Callable[[], datetime] | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        poll_seconds: float = 30.0,
    ) -> None:
        self.tasks = tasks
        self._tz = tz
        self._clock = clock or (lambda: now_local(tz))
        self._sleep = sleep
        self._poll_seconds = poll_seconds
        self._runner: asyncio.Task | None = None
        self._stopping = False

    def _schedule_initial(self, now: datetime) -> None:
        for task in self.tasks:
            if task.next_run is None:
                task.next_run = task.trigger.first_run(now)
                logger.info("Task %s scheduled for %s", task.name, task.next_run.isoformat())

    async def run_pending(self, now: datetime | None = None) -> list[str]:
        """Run every task whose time has come; returns the names that ran."""
        now = now or self._clock()
        self._schedule_initial(now)
        ran = []
        for task in self.tasks:
            if task.next_run is None or task.next_run > now:
                continue
            logger.info("Running scheduled task %s", task.name)
            try:
                await task.action()
            except Exception as exc:
                logger.error("Scheduled task %s failed: %s", task.name, exc, exc_info=True)
            task.next_run = task.trigger.next_after(now)
            ran.append(task.name)
        return ran

    async def serve(self) -> None:
        while not self._stopping:
            await self.run_pending()
            await self._sleep(self._poll_seconds)

    def start(self) -> None:
        if self._runner is None:
            self._stopping = False
            self._runner = asyncio.create_task(self.serve())
            logger.info("Scheduler started with %d task(s)", len(self.tasks))

    async def stop(self) -> None:
        self._stopping = True
        if self._runner is not None:
            self._runner.cancel()
            try:
                await self._runner
            except asyncio.CancelledError:
                pass
            self._runner = None
            logger.info("Scheduler stopped")
