from __future__ import annotations

from datetime import date, timedelta

from src.domain.models.birth import Birth
from src.domain.models.heat import Heat, HeatStatus
from src.domain.models.piglet import Piglet
from src.domain.models.pregnancy import Pregnancy, PregnancyStatus
from src.domain.models.service import Service
from src.domain.models.sow import ReproductiveStatus, Sow
from src.domain.services.sow_history import SowHistory
from src.domain.services.sow_projection import derive_reproductive_status, project_sow

BASE = date(2024, 1, 10)


def serviced_history() -> tuple[SowHistory, Heat, Service]:
    history = SowHistory(sow=Sow.create(ear_tag="S-1"))
    heat = Heat.create(sow_id=history.sow.id, heat_date=BASE)
    heat.status = HeatStatus.SERVICED.value
    service = Service.create(
        sow_id=history.sow.id, heat_id=heat.id, service_date=BASE, service_type="natural"
    )
    history.heats.append(heat)
    history.services.append(service)
    return history, heat, service


def farrowed(history: SowHistory, birth_date: date, alive: int = 2) -> Birth:
    birth = Birth.create(
        sow_id=history.sow.id,
        pregnancy_id=history.sow.id,
        birth_date=birth_date,
        born_alive=alive,
        born_dead=1,
        mummified=1,
        total_born=alive + 2,
        gestation_days=114,
        weaning_age_days=21,
    )
    history.births.append(birth)
    history.piglets.extend(
        Piglet.create(birth_id=birth.id, sow_id=history.sow.id, birth_status="alive")
        for _ in range(alive)
    )
    return birth


def test_new_sow_is_empty():
    projection = project_sow(SowHistory(sow=Sow.create(ear_tag="S-1")))

    assert projection.reproductive_status == ReproductiveStatus.EMPTY.value
    assert projection.parity_count == 0
    assert projection.expected_farrowing_date is None


def test_detected_heat_means_in_heat():
    history = SowHistory(sow=Sow.create(ear_tag="S-1"))
    history.heats.append(Heat.create(sow_id=history.sow.id, heat_date=BASE))

    assert derive_reproductive_status(history) is ReproductiveStatus.IN_HEAT


def test_cancelled_heat_is_ignored():
    history = SowHistory(sow=Sow.create(ear_tag="S-1"))
    heat = Heat.create(sow_id=history.sow.id, heat_date=BASE)
    heat.status = HeatStatus.CANCELLED.value
    history.heats.append(heat)

    assert derive_reproductive_status(history) is ReproductiveStatus.EMPTY


def test_serviced_heat_means_in_service_until_outcome_is_negative():
    history, _, service = serviced_history()
    assert derive_reproductive_status(history) is ReproductiveStatus.IN_SERVICE

    service.success = False
    assert derive_reproductive_status(history) is ReproductiveStatus.EMPTY


def test_unconfirmed_pregnancy_keeps_in_service():
    history, _, service = serviced_history()
    history.pregnancies.append(
        Pregnancy.create(
            sow_id=history.sow.id,
            service_id=service.id,
            conception_date=BASE,
            gestation_days=114,
        )
    )

    assert derive_reproductive_status(history) is ReproductiveStatus.IN_SERVICE


def test_confirmed_pregnancy_wins_and_sets_expected_farrowing():
    history, _, service = serviced_history()
    pregnancy = Pregnancy.create(
        sow_id=history.sow.id,
        service_id=service.id,
        conception_date=BASE,
        gestation_days=114,
        confirmation_date=BASE + timedelta(days=28),
        confirmation_method="ultrasound",
    )
    history.pregnancies.append(pregnancy)

    projection = project_sow(history)

    assert projection.reproductive_status == ReproductiveStatus.PREGNANT.value
    assert projection.expected_farrowing_date == BASE + timedelta(days=114)
    assert pregnancy.ultrasound_count == 1


def test_closed_pregnancy_no_longer_counts():
    history, _, service = serviced_history()
    pregnancy = Pregnancy.create(
        sow_id=history.sow.id,
        service_id=service.id,
        conception_date=BASE,
        gestation_days=114,
        confirmation_date=BASE + timedelta(days=28),
        confirmation_method="visual",
    )
    pregnancy.status = PregnancyStatus.COMPLETED_BIRTH.value
    history.pregnancies.append(pregnancy)
    farrowed(history, BASE + timedelta(days=114))

    projection = project_sow(history)

    assert projection.reproductive_status == ReproductiveStatus.LACTATING.value
    assert projection.expected_farrowing_date is None


def test_nursing_litter_means_lactating_and_counters_are_aggregated():
    history = SowHistory(sow=Sow.create(ear_tag="S-1"))
    farrowed(history, BASE, alive=3)
    farrowed(history, BASE - timedelta(days=160), alive=0)

    projection = project_sow(history)

    assert projection.reproductive_status == ReproductiveStatus.LACTATING.value
    assert projection.parity_count == 2
    assert projection.total_piglets_born == 7
    assert projection.total_piglets_alive == 3
    assert projection.total_piglets_dead == 4
    assert projection.last_farrowing_date == BASE


def test_weaned_litter_returns_to_empty():
    history = SowHistory(sow=Sow.create(ear_tag="S-1"))
    birth = farrowed(history, BASE)
    for piglet in history.litter_of(birth):
        piglet.wean(birth.expected_weaning_date)

    projection = project_sow(history)

    assert projection.reproductive_status == ReproductiveStatus.EMPTY.value
    assert projection.last_weaning_date == birth.expected_weaning_date


def test_heats_before_last_farrowing_belong_to_a_previous_cycle():
    history = SowHistory(sow=Sow.create(ear_tag="S-1"))
    history.heats.append(Heat.create(sow_id=history.sow.id, heat_date=BASE - timedelta(days=5)))
    birth = farrowed(history, BASE, alive=0)

    assert derive_reproductive_status(history) is ReproductiveStatus.EMPTY

    history.heats.append(
        Heat.create(sow_id=history.sow.id, heat_date=birth.birth_date + timedelta(days=25))
    )
    assert derive_reproductive_status(history) is ReproductiveStatus.IN_HEAT


def test_projection_detects_drift_from_stored_sow():
    history, _, _ = serviced_history()
    projection = project_sow(history)

    assert projection.differs_from(history.sow)
    history.sow.reproductive_status = ReproductiveStatus.IN_SERVICE.value
    assert not projection.differs_from(history.sow)
