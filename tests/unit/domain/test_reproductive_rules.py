from __future__ import annotations

from datetime import date, timedelta

from src.domain.models.abortion import Abortion
from src.domain.models.birth import Birth
from src.domain.models.heat import Heat, HeatStatus
from src.domain.models.pregnancy import Pregnancy
from src.domain.models.service import Service
from src.domain.models.sow import AnimalStatus, Sow
from src.domain.services.reproductive_rules import (
    check_heat_registration,
    check_induced_heat_registration,
    check_pregnancy_registration,
    check_service_registration,
)
from src.domain.services.sow_history import SowHistory

BASE = date(2024, 3, 1)


def make_history(**kwargs) -> SowHistory:
    sow = Sow.create(ear_tag="S-100")
    return SowHistory(sow=sow, **kwargs)


def add_heat(history: SowHistory, heat_date: date, status: str = HeatStatus.DETECTED.value):
    heat = Heat.create(sow_id=history.sow.id, heat_date=heat_date)
    heat.status = status
    history.heats.append(heat)
    return heat


def add_service(history: SowHistory, heat: Heat, service_date: date) -> Service:
    service = Service.create(
        sow_id=history.sow.id,
        heat_id=heat.id,
        service_date=service_date,
        service_type="natural",
    )
    history.services.append(service)
    heat.status = HeatStatus.SERVICED.value
    return service


def add_pregnancy(history: SowHistory, conception: date, *, confirmed: bool) -> Pregnancy:
    pregnancy = Pregnancy.create(
        sow_id=history.sow.id,
        service_id=history.services[0].id if history.services else history.sow.id,
        conception_date=conception,
        gestation_days=114,
        confirmation_date=conception + timedelta(days=25) if confirmed else None,
        confirmation_method="ultrasound" if confirmed else None,
    )
    history.pregnancies.append(pregnancy)
    return pregnancy


def test_missing_sow_short_circuits():
    result = check_heat_registration(None, BASE)
    assert result.errors == ["Sow not found"]
    assert result.warnings == []


def test_first_heat_is_valid_without_warnings():
    result = check_heat_registration(make_history(), BASE)
    assert result.valid
    assert result.warnings == []


def test_heat_ten_days_after_previous_is_rejected():
    history = make_history()
    add_heat(history, BASE)

    result = check_heat_registration(history, BASE + timedelta(days=10))

    assert not result.valid
    assert "too short (10 days" in result.errors[0]


def test_heat_nineteen_days_after_previous_only_warns():
    history = make_history()
    add_heat(history, BASE)

    result = check_heat_registration(history, BASE + timedelta(days=19))

    assert result.valid
    assert len(result.warnings) == 1
    assert "21-day cycle" in result.warnings[0]


def test_heat_twenty_five_days_after_previous_is_clean():
    history = make_history()
    add_heat(history, BASE)

    result = check_heat_registration(history, BASE + timedelta(days=25))

    assert result.valid
    assert result.warnings == []


def test_not_serviced_heats_do_not_count_for_the_interval():
    history = make_history()
    add_heat(history, BASE, status=HeatStatus.NOT_SERVICED.value)

    result = check_heat_registration(history, BASE + timedelta(days=5))

    assert result.valid


def test_induced_heat_downgrades_short_interval_to_warning():
    history = make_history()
    add_heat(history, BASE)

    result = check_induced_heat_registration(history, BASE + timedelta(days=10))

    assert result.valid
    assert len(result.warnings) == 2
    assert any("hormonal protocol" in w for w in result.warnings)


def test_all_heat_errors_are_collected():
    history = make_history()
    history.sow.status = AnimalStatus.DISCARDED.value
    heat = add_heat(history, BASE)
    add_service(history, heat, BASE)
    add_pregnancy(history, BASE, confirmed=True)

    result = check_heat_registration(history, BASE + timedelta(days=30))

    assert len(result.errors) == 2
    assert "not active" in result.errors[0]
    assert "confirmed pregnancy" in result.errors[1]


def test_heat_inside_post_farrowing_recovery_is_rejected():
    history = make_history()
    birth_date = BASE
    history.births.append(
        Birth.create(
            sow_id=history.sow.id,
            pregnancy_id=history.sow.id,
            birth_date=birth_date,
            born_alive=10,
            born_dead=1,
            mummified=0,
            total_born=11,
            gestation_days=114,
            weaning_age_days=21,
        )
    )

    early = check_heat_registration(history, birth_date + timedelta(days=10))
    later = check_heat_registration(history, birth_date + timedelta(days=21))

    assert any("post-farrowing" in e for e in early.errors)
    assert later.valid


def test_records_after_the_proposed_date_are_ignored():
    history = make_history()
    history.abortions.append(
        Abortion.create(
            sow_id=history.sow.id,
            pregnancy_id=history.sow.id,
            abortion_date=BASE + timedelta(days=5),
            gestation_days=40,
            recovery_days=14,
        )
    )

    result = check_heat_registration(history, BASE)

    assert result.valid


def test_heat_inside_post_abortion_recovery_is_rejected():
    history = make_history()
    history.abortions.append(
        Abortion.create(
            sow_id=history.sow.id,
            pregnancy_id=history.sow.id,
            abortion_date=BASE,
            gestation_days=40,
            recovery_days=14,
        )
    )

    result = check_heat_registration(history, BASE + timedelta(days=7))

    assert any("post-abortion" in e for e in result.errors)


def test_second_service_within_window_warns():
    history = make_history()
    heat = add_heat(history, BASE)
    first = add_service(history, heat, BASE)

    result = check_service_registration(
        history, heat, [first], BASE + timedelta(days=2)
    )

    assert result.valid
    assert result.warnings == ["Additional service for the same heat (service #2)"]


def test_service_after_window_is_rejected():
    history = make_history()
    heat = add_heat(history, BASE)
    first = add_service(history, heat, BASE)

    result = check_service_registration(
        history, heat, [first], BASE + timedelta(days=5)
    )

    assert not result.valid
    assert "5 days ago" in result.errors[0]


def test_service_needs_an_existing_heat_of_the_same_sow():
    history = make_history()
    missing = check_service_registration(history, None, [], BASE)
    other_heat = Heat.create(sow_id=Sow.create(ear_tag="S-200").id, heat_date=BASE)
    foreign = check_service_registration(history, other_heat, [], BASE)

    assert missing.errors == ["Heat not found"]
    assert foreign.errors == ["Heat does not belong to this sow"]


def test_service_on_not_serviced_heat_warns():
    history = make_history()
    heat = add_heat(history, BASE, status=HeatStatus.NOT_SERVICED.value)

    result = check_service_registration(history, heat, [], BASE + timedelta(days=1))

    assert result.valid
    assert "not_serviced" in result.warnings[0]


def test_unconfirmed_pregnancy_in_progress_blocks_a_new_one():
    history = make_history()
    heat = add_heat(history, BASE)
    service = add_service(history, heat, BASE)
    add_pregnancy(history, BASE, confirmed=False)

    result = check_pregnancy_registration(history, service, True, BASE)

    assert not result.valid
    assert "pending confirmation" in result.errors[0]
    assert result.warnings == ["This service already has a pregnancy recorded"]


def test_pregnancy_with_service_of_other_sow_is_rejected():
    history = make_history()
    service = Service.create(
        sow_id=Sow.create(ear_tag="S-300").id,
        heat_id=history.sow.id,
        service_date=BASE,
        service_type="artificial",
    )

    result = check_pregnancy_registration(history, service, False, BASE)

    assert result.errors == ["Service does not belong to this sow"]


def test_pregnancy_soon_after_abortion_only_warns():
    history = make_history()
    history.abortions.append(
        Abortion.create(
            sow_id=history.sow.id,
            pregnancy_id=history.sow.id,
            abortion_date=BASE,
            gestation_days=30,
            recovery_days=14,
        )
    )
    heat = add_heat(history, BASE + timedelta(days=10))
    service = add_service(history, heat, BASE + timedelta(days=10))

    result = check_pregnancy_registration(
        history, service, False, BASE + timedelta(days=10)
    )

    assert result.valid
    assert "shortly after an abortion" in result.warnings[0]
