"""Startup helpers for database migrations and store reachability."""

from __future__ import annotations

import time
from pathlib import Path

import structlog
from alembic import command
from alembic.config import Config as AlembicConfig
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine
from structlog.stdlib import BoundLogger

from users_app.core.config import Settings
from users_app.core.exceptions import StartupError
from users_app.db import apply_asyncpg_scheme

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_MIGRATIONS_PATH = _PROJECT_ROOT / "migrations"


def alembic_config(settings: Settings) -> AlembicConfig:
    """Alembic configuration that does not depend on the working directory."""
    config = AlembicConfig()
    config.set_main_option("script_location", str(_MIGRATIONS_PATH))
    config.set_main_option("prepend_sys_path", str(_PROJECT_ROOT))
    # ConfigParser interpolation treats '%' specially.
    config.set_main_option(
        "sqlalchemy.url", apply_asyncpg_scheme(settings.database_url).replace("%", "%%")
    )
    return config


def run_database_migrations(settings: Settings) -> None:
    """Execute `alembic upgrade head` with retries; raise StartupError when exhausted.

    Blocking; call it from a worker thread since the async env.py starts its
    own event loop.
    """

    logger = structlog.get_logger(__name__)
    success, error_message = _run_migrations_sequence(settings, logger)
    if not success:
        raise StartupError(f"failed to run migrations: {error_message}")


def _run_migrations_sequence(settings: Settings, logger: BoundLogger) -> tuple[bool, str | None]:
    config = alembic_config(settings)
    last_error: str | None = None
    max_attempts = settings.migration_max_attempts

    for attempt in range(1, max_attempts + 1):
        try:
            logger.info("alembic_upgrade_start", attempt=attempt)
            command.upgrade(config, "head")
        except Exception as exc:
            last_error = str(exc) or exc.__class__.__name__
            logger.exception("alembic_upgrade_failed", attempt=attempt)
        else:
            logger.info("alembic_upgrade_succeeded", attempt=attempt)
            return True, None

        if attempt < max_attempts:
            delay = settings.migration_retry_seconds * attempt
            logger.info("alembic_upgrade_retry", next_attempt=attempt + 1, delay_seconds=delay)
            time.sleep(delay)

    logger.error("alembic_upgrade_exhausted", attempts=max_attempts)
    return False, last_error or "alembic upgrade failed"


async def check_database(engine: AsyncEngine) -> None:
    """Issue `SELECT 1`; raise StartupError when the store cannot be reached."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except Exception as exc:
        raise StartupError(f"failed to ping database: {exc}") from exc


__all__ = ["alembic_config", "check_database", "run_database_migrations"]
