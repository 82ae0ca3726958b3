from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import sentry_sdk
import structlog
from fastapi import FastAPI
from sentry_sdk.integrations.starlette import StarletteIntegration

from users_app.api import errors
from users_app.api.routers.healthz import router as healthz_router
from users_app.api.routers.readyz import router as readyz_router
from users_app.api.routers.users import router as users_router
from users_app.core.config import Settings
from users_app.core.startup import check_database, run_database_migrations
from users_app.db import create_engine, create_session_factory
from users_app.logging import setup_logging
from users_app.middleware.deadline import RequestDeadlineMiddleware
from users_app.middleware.request_id import request_id_middleware


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    # Initialize structured logging first
    setup_logging(settings.log_level, settings.resolved_log_format)
    logger = structlog.get_logger(__name__)

    # Sentry stays a no-op without a DSN
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.app_env,
            integrations=[StarletteIntegration()],
            send_default_pii=False,
        )

    engine = create_engine(settings)
    session_factory = create_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("app_startup", env=settings.app_env, port=settings.http_port)
        try:
            if settings.run_migrations:
                # env.py runs its own event loop, so keep it off ours
                await asyncio.to_thread(run_database_migrations, settings)
            await check_database(engine)
        except Exception:
            await engine.dispose()
            raise
        app.state.ready = True
        try:
            yield
        finally:
            app.state.ready = False
            await engine.dispose()
            logger.info("app_shutdown")

    app = FastAPI(title="Users API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory
    app.state.ready = False

    app.add_middleware(RequestDeadlineMiddleware, timeout_seconds=settings.request_timeout_seconds)
    # Request-ID middleware (JSON access log); registered last so it wraps the deadline
    app.middleware("http")(request_id_middleware)

    errors.install(app)

    app.include_router(users_router, prefix=settings.api_prefix)
    app.include_router(healthz_router)
    app.include_router(readyz_router)
    return app
