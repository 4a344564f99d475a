from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator, Callable
from datetime import date
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.application.use_cases.boars import create_boar
from src.application.use_cases.heats import register_heat
from src.application.use_cases.pregnancies import register_pregnancy
from src.application.use_cases.services import register_service
from src.application.use_cases.sows import create_sow
from src.config.settings import Settings
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import (  # noqa: F401
    abortion,
    birth,
    boar,
    heat,
    notification,
    piglet,
    pregnancy,
    service,
    sow,
)
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.main import create_app


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "actor_header": "X-Actor",
            "log_level": "INFO",
            "environment": "test",
            "scheduler_enabled": False,
        }
    )


@pytest.fixture()
def app(test_settings: Settings):
    return create_app(settings=test_settings)


@pytest.fixture()
async def session_factory(app):
    engine = app.state.engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield app.state.session_factory


@pytest.fixture()
def uow_factory(session_factory) -> Callable[[], SQLAlchemyUnitOfWork]:
    return lambda: SQLAlchemyUnitOfWork(session_factory)


@pytest.fixture()
async def client(app, session_factory) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


class Herd:
    """Shortcuts that commit each step through the use cases."""

    def __init__(self, uow_factory: Callable[[], SQLAlchemyUnitOfWork]) -> None:
        self.uow_factory = uow_factory

    async def sow(self, ear_tag: str = "S-001", **kwargs):
        async with self.uow_factory() as uow:
            created = await create_sow.execute(
                uow, create_sow.CreateSowInput(ear_tag=ear_tag, **kwargs)
            )
            await uow.commit()
        return created

    async def boar(self, ear_tag: str = "B-001"):
        async with self.uow_factory() as uow:
            created = await create_boar.execute(uow, create_boar.CreateBoarInput(ear_tag=ear_tag))
            await uow.commit()
        return created

    async def heat(self, sow_id, heat_date: date, **kwargs):
        async with self.uow_factory() as uow:
            result = await register_heat.execute(
                uow,
                register_heat.RegisterHeatInput(sow_id=sow_id, heat_date=heat_date, **kwargs),
            )
            await uow.commit()
        return result.heat

    async def service(self, sow_id, heat_id, service_date: date, **kwargs):
        kwargs.setdefault("service_type", "natural")
        async with self.uow_factory() as uow:
            result = await register_service.execute(
                uow,
                register_service.RegisterServiceInput(
                    sow_id=sow_id, heat_id=heat_id, service_date=service_date, **kwargs
                ),
            )
            await uow.commit()
        return result.service

    async def pregnancy(self, sow_id, service_id, conception_date: date, **kwargs):
        async with self.uow_factory() as uow:
            result = await register_pregnancy.execute(
                uow,
                register_pregnancy.RegisterPregnancyInput(
                    sow_id=sow_id,
                    service_id=service_id,
                    conception_date=conception_date,
                    **kwargs,
                ),
            )
            await uow.commit()
        return result.pregnancy

    async def get_sow(self, sow_id):
        async with self.uow_factory() as uow:
            return await uow.sows.get(sow_id)


@pytest.fixture()
def herd(uow_factory) -> Herd:
    return Herd(uow_factory)
