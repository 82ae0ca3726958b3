from __future__ import annotations

from pathlib import Path

import pytest

from users_app.core import startup
from users_app.core.exceptions import StartupError


def test_alembic_config_points_at_migrations(settings):
    config = startup.alembic_config(
        settings.model_copy(update={"database_url": "postgresql://u:p%40ss@h/db"})
    )

    script_location = Path(config.get_main_option("script_location"))
    assert script_location.name == "migrations"
    assert (script_location / "env.py").exists()
    assert config.get_main_option("sqlalchemy.url") == "postgresql+asyncpg://u:p%40ss@h/db"


def test_migrations_retry_then_succeed(settings, monkeypatch):
    attempts = []

    def fake_upgrade(config, revision):
        attempts.append(revision)
        if len(attempts) < 3:
            raise OSError("database starting up")

    monkeypatch.setattr(startup.command, "upgrade", fake_upgrade)

    startup.run_database_migrations(
        settings.model_copy(update={"migration_max_attempts": 5, "migration_retry_seconds": 0})
    )

    assert attempts == ["head", "head", "head"]


def test_migrations_exhausted_raise_startup_error(settings, monkeypatch):
    def fake_upgrade(config, revision):
        raise OSError("connection refused")

    monkeypatch.setattr(startup.command, "upgrade", fake_upgrade)

    with pytest.raises(StartupError, match="connection refused"):
        startup.run_database_migrations(
            settings.model_copy(update={"migration_max_attempts": 2, "migration_retry_seconds": 0})
        )


class _FailingConnect:
    async def __aenter__(self):
        raise ConnectionRefusedError("connection refused")

    async def __aexit__(self, exc_type, exc, tb):
        return False


class _UnreachableEngine:
    def connect(self):
        return _FailingConnect()


@pytest.mark.asyncio
async def test_check_database_unreachable_raises_startup_error():
    with pytest.raises(StartupError, match="failed to ping database"):
        await startup.check_database(_UnreachableEngine())


@pytest.mark.asyncio
async def test_lifespan_migrates_checks_and_marks_ready(settings, monkeypatch):
    from users_app.main import create_app

    calls = []

    async def fake_check(engine):
        calls.append("check")

    monkeypatch.setattr("users_app.main.check_database", fake_check)
    monkeypatch.setattr("users_app.main.run_database_migrations", lambda s: calls.append("migrate"))
    app = create_app(settings.model_copy(update={"run_migrations": True}))

    async with app.router.lifespan_context(app):
        assert app.state.ready is True

    assert app.state.ready is False
    assert calls == ["migrate", "check"]


@pytest.mark.asyncio
async def test_lifespan_startup_failure_aborts(settings, monkeypatch):
    from users_app.main import create_app

    async def unreachable(engine):
        raise StartupError("failed to ping database: connection refused")

    monkeypatch.setattr("users_app.main.check_database", unreachable)
    app = create_app(settings)

    with pytest.raises(StartupError):
        async with app.router.lifespan_context(app):
            pass  # pragma: no cover - startup fails before yielding

    assert app.state.ready is False


@pytest.mark.parametrize("grace", [0, 15])
def test_main_passes_shutdown_grace_to_uvicorn(settings, monkeypatch, grace):
    from users_app import __main__ as entrypoint

    captured = {}
    configured = settings.model_copy(update={"shutdown_grace_seconds": grace})
    monkeypatch.setattr(entrypoint, "Settings", lambda: configured)
    monkeypatch.setattr(entrypoint.uvicorn, "run", lambda app, **kw: captured.update(kw))

    entrypoint.main()

    assert captured["timeout_graceful_shutdown"] == grace
    assert captured["port"] == configured.http_port
