from __future__ import annotations

from datetime import datetime, time, timedelta

from zoneinfo import ZoneInfo

from src.infrastructure.scheduler.runner import DailyAt, Every, ScheduledTask, TaskScheduler

TZ = ZoneInfo("America/Bogota")


def at(hour: int, minute: int = 0, day: int = 15) -> datetime:
    return datetime(2024, 1, day, hour, minute, tzinfo=TZ)


def test_daily_trigger_picks_today_or_tomorrow():
    trigger = DailyAt.parse("02:30")

    assert trigger.at == time(2, 30)
    assert trigger.next_after(at(1, 0)) == at(2, 30)
    assert trigger.next_after(at(2, 30)) == at(2, 30, day=16)
    assert trigger.first_run(at(9, 0)) == at(2, 30, day=16)


def test_daily_trigger_keeps_wall_clock_time_across_dst():
    eastern = ZoneInfo("America/New_York")
    trigger = DailyAt(time(8, 0))

    next_run = trigger.next_after(datetime(2024, 3, 9, 9, 0, tzinfo=eastern))

    assert next_run == datetime(2024, 3, 10, 8, 0, tzinfo=eastern)
    assert (next_run.hour, next_run.minute) == (8, 0)
    assert next_run.utcoffset() == timedelta(hours=-4)
    assert trigger.next_after(next_run) == datetime(2024, 3, 11, 8, 0, tzinfo=eastern)


def test_interval_trigger_runs_immediately_then_every_interval():
    trigger = Every(timedelta(hours=6))

    assert trigger.first_run(at(8)) == at(8)
    assert trigger.next_after(at(8)) == at(14)


async def test_run_pending_runs_due_tasks_once():
    calls: list[str] = []

    async def expire() -> None:
        calls.append("expire")

    async def remind() -> None:
        calls.append("remind")

    scheduler = TaskScheduler(
        [
            ScheduledTask("heat-expiry", DailyAt(time(2, 0)), expire),
            ScheduledTask("reminders", Every(timedelta(hours=6)), remind),
        ],
        tz=TZ,
    )

    assert await scheduler.run_pending(at(1, 0)) == ["reminders"]
    assert await scheduler.run_pending(at(1, 30)) == []
    assert await scheduler.run_pending(at(2, 0)) == ["heat-expiry"]
    assert await scheduler.run_pending(at(7, 0)) == ["reminders"]
    assert calls == ["remind", "expire", "remind"]


async def test_failing_task_is_logged_and_rescheduled(caplog):
    async def broken() -> None:
        raise RuntimeError("database unavailable")

    task = ScheduledTask("weaning", DailyAt(time(3, 0)), broken, next_run=at(3, 0))
    scheduler = TaskScheduler([task], tz=TZ)

    ran = await scheduler.run_pending(at(3, 0))

    assert ran == ["weaning"]
    assert task.next_run == at(3, 0, day=16)
    assert "Scheduled task weaning failed" in caplog.text


async def test_clock_is_used_when_no_time_is_given():
    calls: list[int] = []

    async def job() -> None:
        calls.append(1)

    scheduler = TaskScheduler(
        [ScheduledTask("job", Every(timedelta(minutes=5)), job)],
        tz=TZ,
        clock=lambda: at(10),
    )

    await scheduler.run_pending()

    assert calls == [1]
