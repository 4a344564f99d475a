from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.config.settings import Settings, get_settings
from src.infrastructure.db.session import create_engine, create_session_factory
from src.interfaces.http.deps import get_app_settings
from src.interfaces.http.routers import (
    abortions,
    births,
    boars,
    heats,
    notifications,
    piglets,
    pregnancies,
    reproduction,
    services,
    sows,
)
from src.interfaces.middleware.error_handler import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    scheduler = None
    if settings.scheduler_enabled:
        from src.infrastructure.scheduler.reproduction_tasks import build_scheduler

        scheduler = build_scheduler(app.state.session_factory, settings)
        scheduler.start()
    app.state.scheduler = scheduler
    try:
        yield
    finally:
        if scheduler is not None:
            await scheduler.stop()
        engine = getattr(app.state, "engine", None)
        if engine is not None:
            await engine.dispose()


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    root = logging.getLogger()
    # Avoid adding duplicate handlers on reload
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)
    # SQL echo only when explicitly debugging
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx"):
        logging.getLogger(name).setLevel(level)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if level <= logging.DEBUG else logging.WARNING
    )


def create_app(*, settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings.log_level)
    app = FastAPI(
        title="Porcime Backend",
        version="0.1.0",
        description="Reproductive management API for sow herds",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = create_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    register_error_handlers(app)

    # Group all API routes behind a single versioned prefix
    api = APIRouter(prefix="/api/v1")
    api.include_router(sows.router)
    api.include_router(boars.router)
    api.include_router(heats.router)
    api.include_router(services.router)
    api.include_router(pregnancies.router)
    api.include_router(births.router)
    api.include_router(abortions.router)
    api.include_router(piglets.router)
    api.include_router(notifications.router)
    api.include_router(reproduction.router)

    @api.get("/health", tags=["health"])
    async def health(_: Settings = Depends(get_app_settings)) -> dict[str, str]:  # noqa: ANN001
        return {"status": "ok"}

    app.include_router(api)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info("Application configured (environment=%s)", settings.environment)
    return app


app = create_app()
