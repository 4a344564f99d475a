from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.interfaces.unit_of_work import UnitOfWork

_REPOSITORY_NAMES = (
    "sows",
    "boars",
    "heats",
    "services",
    "pregnancies",
    "births",
    "abortions",
    "piglets",
    "notifications",
)


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.events: list = []
        self._reset_repositories()

    def _reset_repositories(self) -> None:
        for name in _REPOSITORY_NAMES:
            setattr(self, name, None)

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from src.infrastructure.repos.abortions_sqlalchemy import AbortionsSQLAlchemyRepository
        from src.infrastructure.repos.births_sqlalchemy import BirthsSQLAlchemyRepository
        from src.infrastructure.repos.boars_sqlalchemy import BoarsSQLAlchemyRepository
        from src.infrastructure.repos.heats_sqlalchemy import HeatsSQLAlchemyRepository
        from src.infrastructure.repos.notifications_sqlalchemy import (
            NotificationsSQLAlchemyRepository,
        )
        from src.infrastructure.repos.piglets_sqlalchemy import PigletsSQLAlchemyRepository
        from src.infrastructure.repos.pregnancies_sqlalchemy import (
            PregnanciesSQLAlchemyRepository,
        )
        from src.infrastructure.repos.services_sqlalchemy import ServicesSQLAlchemyRepository
        from src.infrastructure.repos.sows_sqlalchemy import SowsSQLAlchemyRepository

        self.sows = SowsSQLAlchemyRepository(self.session)
        self.boars = BoarsSQLAlchemyRepository(self.session)
        self.heats = HeatsSQLAlchemyRepository(self.session)
        self.services = ServicesSQLAlchemyRepository(self.session)
        self.pregnancies = PregnanciesSQLAlchemyRepository(self.session)
        self.births = BirthsSQLAlchemyRepository(self.session)
        self.abortions = AbortionsSQLAlchemyRepository(self.session)
        self.piglets = PigletsSQLAlchemyRepository(self.session)
        self.notifications = NotificationsSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self._reset_repositories()

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()

    async def rollback(self) -> None:
        if not self.session:
            return
        await self.session.rollback()

    def add_event(self, event: object) -> None:
        self.events.append(event)

    def drain_events(self) -> list:
        events, self.events = self.events, []
        return events
