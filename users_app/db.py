# users_app/db.py
from __future__ import annotations

from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from users_app.core.config import Settings


def apply_asyncpg_scheme(database_url: str) -> str:
    if database_url.startswith("postgresql+psycopg://"):
        return database_url.replace("postgresql+psycopg://", "postgresql+asyncpg://", 1)
    if database_url.startswith("postgresql+psycopg2://"):
        return database_url.replace("postgresql+psycopg2://", "postgresql+asyncpg://", 1)
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if database_url.startswith("postgres://"):
        return database_url.replace("postgres://", "postgresql+asyncpg://", 1)
    return database_url


def create_engine(settings: Settings, **overrides) -> AsyncEngine:
    """Build the pooled async engine; the pool is the only state shared by requests."""

    url = make_url(apply_asyncpg_scheme(settings.database_url))
    connect_args: dict = {
        "timeout": settings.db_connect_timeout_seconds,
        "command_timeout": settings.db_command_timeout_seconds,
    }

    query = dict(url.query)
    if "sslmode" in query:
        # asyncpg accepts 'disable', 'allow', 'prefer', 'require', 'verify-ca', 'verify-full'
        connect_args["ssl"] = query.pop("sslmode")
    if "channel_binding" in query:
        # asyncpg does not support channel_binding
        query.pop("channel_binding")
    url = url.set(query=query)

    options = dict(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout_seconds,
        pool_pre_ping=True,
        connect_args=connect_args,
    )
    options.update(overrides)
    return create_async_engine(url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
