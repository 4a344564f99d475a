from __future__ import annotations

from collections.abc import AsyncIterator, Callable

from fastapi import BackgroundTasks, Request

from src.application.events.dispatcher import dispatch_events
from src.config.settings import Settings, get_settings
from src.domain.services.reproductive_rules import ReproductivePeriods
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


def _session_factory(request: Request):
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    return session_factory


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    uow = SQLAlchemyUnitOfWork(_session_factory(request))
    async with uow:
        yield uow


def get_uow_factory(request: Request) -> Callable[[], SQLAlchemyUnitOfWork]:
    """For jobs that open one unit of work per item."""
    session_factory = _session_factory(request)
    return lambda: SQLAlchemyUnitOfWork(session_factory)


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_periods(request: Request) -> ReproductivePeriods:
    return get_app_settings(request).reproductive_periods()


def get_actor(request: Request) -> str | None:
    """Free-form operator name for the audit columns; there is no login."""
    header = get_app_settings(request).actor_header
    value = request.headers.get(header)
    if not value:
        return None
    return value.strip() or None


async def commit_and_dispatch(
    uow: SQLAlchemyUnitOfWork, request: Request, background_tasks: BackgroundTasks
) -> None:
    """Commit, then turn the collected domain events into notifications in the background."""
    await uow.commit()
    events = uow.drain_events()
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory and events:
        background_tasks.add_task(dispatch_events, session_factory, events)
