from __future__ import annotations

from typing import Protocol

from src.application.interfaces.repositories.abortions import AbortionsRepository
from src.application.interfaces.repositories.births import BirthsRepository
from src.application.interfaces.repositories.boars import BoarsRepository
from src.application.interfaces.repositories.heats import HeatsRepository
from src.application.interfaces.repositories.notifications import NotificationsRepository
from src.application.interfaces.repositories.piglets import PigletsRepository
from src.application.interfaces.repositories.pregnancies import PregnanciesRepository
from src.application.interfaces.repositories.services import ServicesRepository
from src.application.interfaces.repositories.sows import SowsRepository


class UnitOfWork(Protocol):
    sows: SowsRepository
    boars: BoarsRepository
    heats: HeatsRepository
    services: ServicesRepository
    pregnancies: PregnanciesRepository
    births: BirthsRepository
    abortions: AbortionsRepository
    piglets: PigletsRepository
    notifications: NotificationsRepository
    # Domain events collected during the transaction
    events: list

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...

    # Record a domain event during the transaction
    def add_event(self, event: object) -> None: ...

    # Drain collected events (used for post-commit dispatch)
    def drain_events(self) -> list: ...
