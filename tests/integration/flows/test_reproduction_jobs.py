from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from src.application.events.dispatcher import dispatch_events
from src.application.use_cases.births import record_birth, wean_litter
from src.application.use_cases.jobs import run_heat_expiry, run_weaning
from src.application.use_cases.notifications import generate_notifications
from src.application.use_cases.piglets import update_piglet
from src.application.use_cases.sows import deactivate_sow
from src.infrastructure.repos.piglets_sqlalchemy import PigletsSQLAlchemyRepository


async def test_heat_expiry_closes_only_stale_unserviced_heats(herd, uow_factory):
    stale = await herd.sow("S-001")
    serviced = await herd.sow("S-002")
    recent = await herd.sow("S-003")
    stale_heat = await herd.heat(stale.id, date(2024, 1, 1))
    serviced_heat = await herd.heat(serviced.id, date(2024, 1, 1))
    await herd.service(serviced.id, serviced_heat.id, date(2024, 1, 2))
    recent_heat = await herd.heat(recent.id, date(2024, 1, 8))

    result = await run_heat_expiry.execute(uow_factory, today=date(2024, 1, 10))

    assert result.updated_count == 1
    assert result.details == [
        {
            "heat_id": str(stale_heat.id),
            "sow_id": str(stale.id),
            "heat_date": "2024-01-01",
            "days_elapsed": 9,
        }
    ]
    async with uow_factory() as uow:
        assert (await uow.heats.get(stale_heat.id)).status == "not_serviced"
        assert (await uow.heats.get(stale_heat.id)).updated_by == "system"
        assert (await uow.heats.get(serviced_heat.id)).status == "serviced"
        assert (await uow.heats.get(recent_heat.id)).status == "detected"
    assert (await herd.get_sow(stale.id)).reproductive_status == "empty"
    assert (await herd.get_sow(serviced.id)).reproductive_status == "in_service"
    assert (await herd.get_sow(recent.id)).reproductive_status == "in_heat"

    again = await run_heat_expiry.execute(uow_factory, today=date(2024, 1, 10))
    assert again.updated_count == 0


async def test_heat_expiry_uses_end_of_heat_window(herd, uow_factory):
    sow = await herd.sow()
    await herd.heat(sow.id, date(2024, 1, 1), heat_end_date=date(2024, 1, 3))

    not_yet = await run_heat_expiry.execute(uow_factory, today=date(2024, 1, 6))
    due = await run_heat_expiry.execute(uow_factory, today=date(2024, 1, 7))

    assert not_yet.updated_count == 0
    assert due.updated_count == 1


async def farrowed_litter(herd, uow_factory, *, born_alive: int = 3, ear_tag: str = "S-001"):
    conception = date(2023, 8, 28)
    sow = await herd.sow(ear_tag)
    heat = await herd.heat(sow.id, conception)
    service = await herd.service(sow.id, heat.id, conception)
    pregnancy = await herd.pregnancy(sow.id, service.id, conception)
    async with uow_factory() as uow:
        birth = await record_birth.execute(
            uow,
            record_birth.RecordBirthInput(
                sow_id=sow.id,
                pregnancy_id=pregnancy.id,
                birth_date=date(2023, 12, 20),
                born_alive=born_alive,
                born_dead=1,
            ),
        )
        await uow.commit()
    return sow, birth


async def test_weaning_job_weans_nursing_piglets_on_planned_date(herd, uow_factory):
    sow, birth = await farrowed_litter(herd, uow_factory)
    assert birth.expected_weaning_date == date(2024, 1, 10)

    async with uow_factory() as uow:
        piglets = await uow.piglets.list_for_birth(birth.id)
    casualty = next(p for p in piglets if p.is_nursing)
    async with uow_factory() as uow:
        await update_piglet.execute(
            uow,
            casualty.id,
            update_piglet.UpdatePigletInput(current_status="dead"),
            today=date(2024, 1, 3),
        )
        await uow.commit()

    result = await run_weaning.execute(uow_factory, today=date(2024, 1, 15))

    assert result.processed_litters == 1
    assert result.piglets_weaned == 2
    assert result.failures == []
    assert [type(e).__name__ for e in result.events] == ["LitterWeanedEvent"]

    async with uow_factory() as uow:
        piglets = {p.id: p for p in await uow.piglets.list_for_birth(birth.id)}
    assert piglets[casualty.id].current_status == "dead"
    assert piglets[casualty.id].exit_date == date(2024, 1, 3)
    weaned = [p for p in piglets.values() if p.current_status == "weaned"]
    assert len(weaned) == 2
    assert {p.weaning_date for p in weaned} == {date(2024, 1, 10)}

    stored = await herd.get_sow(sow.id)
    assert stored.reproductive_status == "empty"
    assert stored.last_weaning_date == date(2024, 1, 10)

    again = await run_weaning.execute(uow_factory, today=date(2024, 1, 16))
    assert again.processed_litters == 0
    assert again.piglets_weaned == 0


async def test_weaning_job_keeps_going_when_one_litter_fails(herd, uow_factory, monkeypatch):
    _, healthy = await farrowed_litter(herd, uow_factory, ear_tag="S-001")
    _, broken = await farrowed_litter(herd, uow_factory, ear_tag="S-002")

    original_update = PigletsSQLAlchemyRepository.update

    async def update(self, piglet):
        if piglet.birth_id == broken.id:
            raise RuntimeError("disk full")
        return await original_update(self, piglet)

    monkeypatch.setattr(PigletsSQLAlchemyRepository, "update", update)

    result = await run_weaning.execute(uow_factory, today=date(2024, 1, 15))

    assert result.processed_litters == 1
    assert result.piglets_weaned == 3
    assert result.failures == [{"birth_id": str(broken.id), "error": "disk full"}]
    async with uow_factory() as uow:
        weaned = await uow.piglets.list_for_birth(healthy.id)
        untouched = await uow.piglets.list_for_birth(broken.id)
    assert sum(p.current_status == "weaned" for p in weaned) == 3
    assert sum(p.is_nursing for p in untouched) == 3


async def test_manual_weaning_is_idempotent(herd, uow_factory):
    sow, birth = await farrowed_litter(herd, uow_factory)

    async with uow_factory() as uow:
        first = await wean_litter.execute(uow, birth.id, actor="ana")
        await uow.commit()

    assert first.already_weaned is False
    assert first.piglets_weaned == 3
    assert first.weaning_date == date(2024, 1, 10)

    async with uow_factory() as uow:
        second = await wean_litter.execute(uow, birth.id, actor="luis")
        await uow.commit()
        assert uow.drain_events() == []

    assert second.already_weaned is True
    assert second.piglets_weaned == 0
    async with uow_factory() as uow:
        weaned = [
            p for p in await uow.piglets.list_for_birth(birth.id) if p.current_status == "weaned"
        ]
    assert len(weaned) == 3
    assert {p.weaning_date for p in weaned} == {date(2024, 1, 10)}
    assert {p.updated_by for p in weaned} == {"ana"}
    assert (await herd.get_sow(sow.id)).last_weaning_date == date(2024, 1, 10)


async def test_weaning_job_ignores_litters_not_yet_due(herd, uow_factory):
    _, birth = await farrowed_litter(herd, uow_factory)

    result = await run_weaning.execute(
        uow_factory, today=birth.expected_weaning_date - timedelta(days=1)
    )

    assert result.processed_litters == 0


async def test_dispatch_turns_events_into_notifications(herd, uow_factory, session_factory):
    _, birth = await farrowed_litter(herd, uow_factory)
    result = await run_weaning.execute(uow_factory, today=date(2024, 1, 15))

    await dispatch_events(session_factory, result.events)

    async with uow_factory() as uow:
        stored = await uow.notifications.list()
    assert [n.type for n in stored] == ["litter_weaned"]
    assert stored[0].related_id == birth.id
    assert stored[0].data["piglets_weaned"] == 3


async def test_generate_notifications_and_dedupe(herd, uow_factory):
    today = date(2024, 4, 20)
    now = datetime(2024, 4, 20, 8, 0, tzinfo=timezone.utc)

    due_sow = await herd.sow("S-FARROW")
    heat = await herd.heat(due_sow.id, date(2024, 1, 1))
    service = await herd.service(due_sow.id, heat.id, date(2024, 1, 1))
    await herd.pregnancy(
        due_sow.id,
        service.id,
        date(2024, 1, 1),
        confirmed=True,
        confirmation_date=date(2024, 1, 28),
        confirmation_method="ultrasound",
    )

    heat_sow = await herd.sow("S-HEAT")
    await herd.heat(heat_sow.id, date(2024, 4, 18))

    check_sow = await herd.sow("S-CHECK")
    heat = await herd.heat(check_sow.id, date(2024, 3, 1))
    service = await herd.service(check_sow.id, heat.id, date(2024, 3, 1))
    await herd.pregnancy(check_sow.id, service.id, date(2024, 3, 1))

    async with uow_factory() as uow:
        first = await generate_notifications.execute(uow, today=today, now=now)
        await uow.commit()
    assert (first.farrowing_soon, first.heat_not_serviced, first.pregnancy_confirmation_due) == (
        1,
        1,
        1,
    )

    async with uow_factory() as uow:
        second = await generate_notifications.execute(uow, today=today, now=now)
        await uow.notifications.mark_all_as_read()
        await uow.commit()
    assert (second.farrowing_soon, second.heat_not_serviced, second.pregnancy_confirmation_due) == (
        0,
        0,
        0,
    )

    # Read reminders no longer suppress farrowing or confirmation reminders
    async with uow_factory() as uow:
        third = await generate_notifications.execute(uow, today=today, now=now)
        await uow.commit()
    assert (third.farrowing_soon, third.heat_not_serviced, third.pregnancy_confirmation_due) == (
        1,
        0,
        1,
    )


async def test_generate_notifications_skips_discarded_sows(herd, uow_factory):
    sow = await herd.sow()
    await herd.heat(sow.id, date(2024, 4, 18))
    async with uow_factory() as uow:
        await deactivate_sow.execute(uow, sow.id)
        await uow.commit()

    async with uow_factory() as uow:
        result = await generate_notifications.execute(
            uow, today=date(2024, 4, 20), now=datetime(2024, 4, 20, tzinfo=timezone.utc)
        )
    assert result.heat_not_serviced == 0
