from __future__ import annotations

from datetime import date, timedelta
from uuid import uuid4

import pytest

from src.application.errors import (
    ConflictError,
    DataInvalidError,
    HasDependentsError,
    ImmutableRecordError,
    NotFound,
    ReproductiveRuleViolation,
)
from src.application.services.sow_state import refresh_sow_state
from src.application.use_cases.abortions import delete_abortion, record_abortion
from src.application.use_cases.births import delete_birth, record_birth
from src.application.use_cases.heats import register_heat
from src.application.use_cases.pregnancies import (
    confirm_pregnancy,
    delete_pregnancy,
    update_pregnancy,
)
from src.application.use_cases.services import delete_service, update_service

CONCEPTION = date(2024, 1, 1)


async def serviced_sow(herd, ear_tag: str = "S-001"):
    sow = await herd.sow(ear_tag)
    heat = await herd.heat(sow.id, CONCEPTION)
    service = await herd.service(sow.id, heat.id, CONCEPTION)
    return sow, heat, service


async def test_confirm_then_delete_pregnancy(herd, uow_factory):
    sow, _, service = await serviced_sow(herd)
    pregnancy = await herd.pregnancy(sow.id, service.id, CONCEPTION)

    stored = await herd.get_sow(sow.id)
    assert stored.reproductive_status == "in_service"
    assert stored.expected_farrowing_date is None

    async with uow_factory() as uow:
        confirmed = await confirm_pregnancy.execute(
            uow,
            pregnancy.id,
            confirm_pregnancy.ConfirmPregnancyInput(
                confirmation_date=date(2024, 1, 25), confirmation_method="ultrasound"
            ),
            actor="vet",
        )
        await uow.commit()
        events = uow.drain_events()

    assert confirmed.confirmed
    assert confirmed.ultrasound_count == 1
    assert [type(e).__name__ for e in events] == ["PregnancyConfirmedEvent"]
    stored = await herd.get_sow(sow.id)
    assert stored.reproductive_status == "pregnant"
    assert stored.expected_farrowing_date == date(2024, 4, 24)
    assert stored.updated_by == "vet"

    async with uow_factory() as uow:
        assert (await uow.services.get(service.id)).success is True
        await delete_pregnancy.execute(uow, pregnancy.id)
        await uow.commit()

    stored = await herd.get_sow(sow.id)
    assert stored.reproductive_status == "empty"
    assert stored.expected_farrowing_date is None
    async with uow_factory() as uow:
        assert (await uow.services.get(service.id)).success is False


async def test_confirmed_pregnancy_blocks_new_heats(herd):
    sow, _, service = await serviced_sow(herd)
    await herd.pregnancy(
        sow.id,
        service.id,
        CONCEPTION,
        confirmed=True,
        confirmation_date=date(2024, 1, 28),
        confirmation_method="visual",
    )

    with pytest.raises(ReproductiveRuleViolation) as exc:
        await herd.heat(sow.id, date(2024, 2, 20))

    assert any("confirmed pregnancy" in e for e in exc.value.errors)
    assert exc.value.details["errors"] == exc.value.errors


async def test_unconfirming_pregnancy_leaves_sow_empty(herd, uow_factory):
    sow, _, service = await serviced_sow(herd)
    pregnancy = await herd.pregnancy(sow.id, service.id, CONCEPTION)
    async with uow_factory() as uow:
        await confirm_pregnancy.execute(
            uow,
            pregnancy.id,
            confirm_pregnancy.ConfirmPregnancyInput(
                confirmation_date=date(2024, 1, 25), confirmation_method="ultrasound"
            ),
        )
        await uow.commit()
    assert (await herd.get_sow(sow.id)).reproductive_status == "pregnant"

    async with uow_factory() as uow:
        updated = await update_pregnancy.execute(
            uow, pregnancy.id, update_pregnancy.UpdatePregnancyInput(confirmed=False)
        )
        await uow.commit()

    assert updated.confirmed is False
    stored = await herd.get_sow(sow.id)
    assert stored.reproductive_status == "empty"
    assert stored.expected_farrowing_date is None
    async with uow_factory() as uow:
        assert (await uow.services.get(service.id)).success is False


async def test_service_with_confirmed_pregnancy_is_immutable(herd, uow_factory):
    sow, _, service = await serviced_sow(herd)
    await herd.pregnancy(
        sow.id,
        service.id,
        CONCEPTION,
        confirmed=True,
        confirmation_date=date(2024, 1, 28),
        confirmation_method="ultrasound",
    )

    async with uow_factory() as uow:
        with pytest.raises(ImmutableRecordError):
            await update_service.execute(
                uow, service.id, update_service.UpdateServiceInput(notes="second mount")
            )

    async with uow_factory() as uow:
        assert (await uow.services.get(service.id)).notes is None


async def test_birth_closes_pregnancy_and_creates_litter(herd, uow_factory):
    boar = await herd.boar()
    sow = await herd.sow()
    heat = await herd.heat(sow.id, CONCEPTION)
    service = await herd.service(sow.id, heat.id, CONCEPTION, boar_id=boar.id)
    pregnancy = await herd.pregnancy(sow.id, service.id, CONCEPTION)

    async with uow_factory() as uow:
        birth = await record_birth.execute(
            uow,
            record_birth.RecordBirthInput(
                sow_id=sow.id,
                pregnancy_id=pregnancy.id,
                birth_date=CONCEPTION + timedelta(days=115),
                born_alive=9,
                born_dead=1,
                mummified=1,
            ),
        )
        await uow.commit()

    assert birth.total_born == 11
    assert birth.gestation_days == 115
    assert birth.boar_id == boar.id
    assert birth.expected_weaning_date == birth.birth_date + timedelta(days=21)

    async with uow_factory() as uow:
        piglets = await uow.piglets.list_for_birth(birth.id)
        closed = await uow.pregnancies.get(pregnancy.id)
        outcome = await uow.services.get(service.id)
    assert len(piglets) == 11
    assert sum(p.is_nursing for p in piglets) == 9
    assert closed.status == "completed_birth"
    assert outcome.success is True

    stored = await herd.get_sow(sow.id)
    assert stored.reproductive_status == "lactating"
    assert stored.parity_count == 1
    assert stored.total_piglets_born == 11
    assert stored.total_piglets_alive == 9
    assert stored.total_piglets_dead == 2
    assert stored.last_farrowing_date == birth.birth_date


async def test_birth_outside_gestation_bounds_is_rejected(herd, uow_factory):
    sow, _, service = await serviced_sow(herd)
    pregnancy = await herd.pregnancy(sow.id, service.id, CONCEPTION)

    async with uow_factory() as uow:
        with pytest.raises(DataInvalidError) as exc:
            await record_birth.execute(
                uow,
                record_birth.RecordBirthInput(
                    sow_id=sow.id,
                    pregnancy_id=pregnancy.id,
                    birth_date=CONCEPTION + timedelta(days=109),
                    born_alive=8,
                ),
            )
    assert "between 110 and 120" in exc.value.message


async def test_terminal_pregnancy_only_accepts_notes(herd, uow_factory):
    sow, _, service = await serviced_sow(herd)
    pregnancy = await herd.pregnancy(sow.id, service.id, CONCEPTION)
    async with uow_factory() as uow:
        await record_birth.execute(
            uow,
            record_birth.RecordBirthInput(
                sow_id=sow.id,
                pregnancy_id=pregnancy.id,
                birth_date=CONCEPTION + timedelta(days=114),
                born_alive=0,
                born_dead=2,
            ),
        )
        await uow.commit()

    async with uow_factory() as uow:
        with pytest.raises(ImmutableRecordError):
            await update_pregnancy.execute(
                uow,
                pregnancy.id,
                update_pregnancy.UpdatePregnancyInput(conception_date=date(2024, 1, 2)),
            )

    async with uow_factory() as uow:
        updated = await update_pregnancy.execute(
            uow, pregnancy.id, update_pregnancy.UpdatePregnancyInput(notes="Parto difícil")
        )
        await uow.commit()
    assert updated.notes == "Parto difícil"
    assert updated.status == "completed_birth"


async def test_dependents_block_deletion(herd, uow_factory):
    sow, heat, service = await serviced_sow(herd)
    pregnancy = await herd.pregnancy(sow.id, service.id, CONCEPTION)

    async with uow_factory() as uow:
        with pytest.raises(HasDependentsError) as exc:
            await delete_service.execute(uow, service.id)
    assert exc.value.dependent == "pregnancy"

    async with uow_factory() as uow:
        birth = await record_birth.execute(
            uow,
            record_birth.RecordBirthInput(
                sow_id=sow.id,
                pregnancy_id=pregnancy.id,
                birth_date=CONCEPTION + timedelta(days=114),
                born_alive=2,
            ),
        )
        await uow.commit()

    async with uow_factory() as uow:
        with pytest.raises(HasDependentsError) as exc:
            await delete_birth.execute(uow, birth.id)
    assert exc.value.dependent == "piglet"

    async with uow_factory() as uow:
        with pytest.raises(HasDependentsError) as exc:
            await delete_pregnancy.execute(uow, pregnancy.id)
    assert exc.value.dependent == "birth"


async def test_abortion_starts_recovery_and_can_be_undone(herd, uow_factory):
    sow, _, service = await serviced_sow(herd)
    pregnancy = await herd.pregnancy(
        sow.id,
        service.id,
        CONCEPTION,
        confirmed=True,
        confirmation_date=date(2024, 1, 25),
        confirmation_method="ultrasound",
    )
    abortion_date = CONCEPTION + timedelta(days=40)

    async with uow_factory() as uow:
        abortion = await record_abortion.execute(
            uow,
            record_abortion.RecordAbortionInput(
                sow_id=sow.id, pregnancy_id=pregnancy.id, abortion_date=abortion_date
            ),
        )
        await uow.commit()

    assert abortion.gestation_days == 40
    assert abortion.recovery_until == abortion_date + timedelta(days=14)
    stored = await herd.get_sow(sow.id)
    assert stored.reproductive_status == "empty"
    assert stored.total_abortions == 1

    with pytest.raises(ReproductiveRuleViolation):
        await herd.heat(sow.id, abortion_date + timedelta(days=7))

    async with uow_factory() as uow:
        await delete_abortion.execute(uow, abortion.id)
        await uow.commit()

    async with uow_factory() as uow:
        reopened = await uow.pregnancies.get(pregnancy.id)
    assert reopened.status == "in_progress"
    stored = await herd.get_sow(sow.id)
    assert stored.reproductive_status == "pregnant"
    assert stored.total_abortions == 0


async def test_stale_sow_version_is_a_conflict(herd, uow_factory):
    sow = await herd.sow()

    async with uow_factory() as uow:
        with pytest.raises(ConflictError):
            await refresh_sow_state(uow, sow.id, expected_version=sow.version + 5)


async def test_heat_for_unknown_sow_is_not_found(herd, uow_factory):
    async with uow_factory() as uow:
        with pytest.raises(NotFound):
            await register_heat.execute(
                uow, register_heat.RegisterHeatInput(sow_id=uuid4(), heat_date=CONCEPTION)
            )
