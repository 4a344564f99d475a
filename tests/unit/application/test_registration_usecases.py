from __future__ import annotations

from datetime import date
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.errors import (
    ConflictError,
    DataInvalidError,
    HasDependentsError,
    NotFound,
    ValidationError,
)
from src.application.use_cases.births import record_birth
from src.application.use_cases.heats import delete_heat, register_heat, update_heat
from src.application.use_cases.services import register_service
from src.application.use_cases.sows import update_sow
from src.domain.models.heat import Heat
from src.domain.models.service import Service
from src.domain.models.sow import Sow


class StubHeats:
    def __init__(self, heat: Heat | None) -> None:
        self.heat = heat
        self.deleted = False

    async def get(self, heat_id):
        return self.heat

    async def delete(self, heat_id):
        self.deleted = True


class StubServices:
    def __init__(self, services: list[Service]) -> None:
        self.services = services

    async def list_for_heat(self, heat_id):
        return self.services


class StubSows:
    def __init__(self, sow: Sow | None) -> None:
        self.sow = sow
        self.update_calls: list[tuple] = []

    async def get(self, sow_id):
        return self.sow

    async def update(self, sow_id, data, expected_version):
        self.update_calls.append((data, expected_version))
        return None


def make_uow(**repos):
    async def commit():
        return None

    return SimpleNamespace(commit=commit, **repos)


async def test_update_heat_rejects_manual_serviced_status():
    heat = Heat.create(sow_id=uuid4(), heat_date=date(2024, 1, 1))
    uow = make_uow(heats=StubHeats(heat))

    with pytest.raises(DataInvalidError):
        await update_heat.execute(
            uow, heat.id, update_heat.UpdateHeatInput(status="serviced")
        )
    assert heat.version == 1


async def test_update_heat_rejects_end_before_start():
    heat = Heat.create(sow_id=uuid4(), heat_date=date(2024, 1, 5))
    uow = make_uow(heats=StubHeats(heat))

    with pytest.raises(ValidationError):
        await update_heat.execute(
            uow, heat.id, update_heat.UpdateHeatInput(heat_end_date=date(2024, 1, 4))
        )


async def test_update_unknown_heat_is_not_found():
    uow = make_uow(heats=StubHeats(None))

    with pytest.raises(NotFound):
        await update_heat.execute(uow, uuid4(), update_heat.UpdateHeatInput(notes="x"))


async def test_delete_heat_with_services_names_the_dependent():
    heat = Heat.create(sow_id=uuid4(), heat_date=date(2024, 1, 1))
    service = Service.create(
        sow_id=heat.sow_id, heat_id=heat.id, service_date=date(2024, 1, 1), service_type="natural"
    )
    heats = StubHeats(heat)
    uow = make_uow(heats=heats, services=StubServices([service]))

    with pytest.raises(HasDependentsError) as exc:
        await delete_heat.execute(uow, heat.id)

    assert exc.value.details == {"dependent": "service"}
    assert heats.deleted is False


async def test_register_heat_checks_input_before_touching_storage():
    uow = make_uow()

    with pytest.raises(ValidationError):
        await register_heat.execute(
            uow,
            register_heat.RegisterHeatInput(
                sow_id=uuid4(),
                heat_date=date(2024, 1, 5),
                heat_end_date=date(2024, 1, 1),
            ),
        )
    with pytest.raises(ValidationError):
        await register_heat.execute(
            uow,
            register_heat.RegisterHeatInput(
                sow_id=uuid4(), heat_date=date(2024, 1, 5), intensity="extreme"
            ),
        )


async def test_register_service_rejects_unknown_type():
    with pytest.raises(ValidationError):
        await register_service.execute(
            make_uow(),
            register_service.RegisterServiceInput(
                sow_id=uuid4(),
                heat_id=uuid4(),
                service_date=date(2024, 1, 1),
                service_type="telepathic",
            ),
        )


async def test_record_birth_rejects_inconsistent_total_before_lookup():
    with pytest.raises(DataInvalidError):
        await record_birth.execute(
            make_uow(),
            record_birth.RecordBirthInput(
                sow_id=uuid4(),
                pregnancy_id=uuid4(),
                birth_date=date(2024, 4, 24),
                born_alive=8,
                born_dead=1,
                total_born=10,
            ),
        )


async def test_update_sow_reports_version_conflict():
    sow = Sow.create(ear_tag="S-1")
    sows = StubSows(sow)
    uow = make_uow(sows=sows)

    with pytest.raises(ConflictError):
        await update_sow.execute(uow, sow.id, update_sow.UpdateSowInput(version=3, alias="Lola"))

    data, expected_version = sows.update_calls[0]
    assert expected_version == 3
    assert "reproductive_status" not in data


async def test_update_sow_rejects_unknown_status():
    sow = Sow.create(ear_tag="S-1")
    uow = make_uow(sows=StubSows(sow))

    with pytest.raises(ValidationError):
        await update_sow.execute(uow, sow.id, update_sow.UpdateSowInput(version=1, status="sold"))
