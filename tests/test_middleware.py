from __future__ import annotations

import asyncio
import uuid

import pytest
from httpx import ASGITransport, AsyncClient

from users_app.api.deps import get_user_service
from users_app.logging import sanitize_headers
from users_app.main import create_app


@pytest.mark.asyncio
async def test_request_id_echoes_back(app_client):
    rid = "test-123"
    res = await app_client.get("/healthz", headers={"X-Request-ID": rid})
    assert res.status_code == 200
    assert res.headers.get("X-Request-ID") == rid


@pytest.mark.asyncio
async def test_request_id_generated_when_missing(app_client):
    res = await app_client.get("/healthz")
    assert res.status_code == 200
    rid = res.headers.get("X-Request-ID")
    assert isinstance(rid, str)
    assert len(rid) > 0


@pytest.mark.asyncio
async def test_request_id_present_on_error_responses(app_client):
    res = await app_client.get("/api/users", params={"id": "nope"})
    assert res.status_code == 400
    assert res.headers.get("X-Request-ID")


def test_sanitize_headers_drops_credentials():
    headers = {
        "Authorization": "Bearer secret",
        "cookie": "session=abc",
        "Proxy-Authorization": "Basic xyz",
        "User-Agent": "pytest",
        "Accept": "application/json",
    }

    assert sanitize_headers(headers) == {"User-Agent": "pytest", "Accept": "application/json"}


class SlowUserService:
    def __init__(self) -> None:
        self.cancelled = False

    async def get_user_by_id(self, user_id):
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            self.cancelled = True
            raise


@pytest.mark.asyncio
async def test_request_deadline_cancels_in_flight_work(settings):
    app = create_app(settings.model_copy(update={"request_timeout_seconds": 0.05}))
    slow = SlowUserService()
    app.dependency_overrides[get_user_service] = lambda: slow

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        res = await ac.get("/api/users", params={"id": str(uuid.uuid4())})

    assert res.status_code == 500
    assert res.json() == {"message": "request timed out"}
    assert slow.cancelled


@pytest.mark.asyncio
async def test_zero_timeout_disables_deadline(settings):
    app = create_app(settings.model_copy(update={"request_timeout_seconds": 0}))

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        res = await ac.get("/healthz")

    assert res.status_code == 200
