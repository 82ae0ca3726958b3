from __future__ import annotations

import time
import uuid
from collections.abc import Callable

import sentry_sdk
import structlog
from fastapi import Request, Response

from users_app.logging import sanitize_headers

REQUEST_ID_HEADER = "X-Request-ID"


def _client_address(request: Request) -> str:
    if request.client is None:
        return "-"
    return f"{request.client.host}:{request.client.port}"


async def request_id_middleware(request: Request, call_next: Callable) -> Response:
    """Attach/propagate Request-ID and emit structured request logs.

    - Prefer inbound X-Request-ID; generate UUID4 if absent
    - Bind request_id, path, method to contextvars so service logs include it
    - Log the incoming request with headers minus credentials
    - Emit one-line access log event="http_request" with status and duration
    - Always set X-Request-ID on the response
    """
    logger = structlog.get_logger(__name__)

    rid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

    structlog.contextvars.bind_contextvars(
        request_id=rid, path=request.url.path, method=request.method
    )
    sentry_sdk.set_tag("request_id", rid)

    client = _client_address(request)
    logger.info(
        "http_request_received",
        method=request.method,
        url=str(request.url),
        headers=sanitize_headers(request.headers),
        client=client,
    )

    start_ns = time.perf_counter_ns()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
    except Exception:
        duration_ms = (time.perf_counter_ns() - start_ns) / 1_000_000.0
        logger.error(
            "http_request",
            status=status_code,
            duration_ms=round(duration_ms, 3),
            client=client,
            exc_info=True,
        )
        structlog.contextvars.clear_contextvars()
        raise

    duration_ms = (time.perf_counter_ns() - start_ns) / 1_000_000.0
    logger.info(
        "http_request",
        status=status_code,
        duration_ms=round(duration_ms, 3),
        client=client,
    )

    response.headers[REQUEST_ID_HEADER] = rid

    # Clear per-request bindings to avoid leakage across tasks
    structlog.contextvars.clear_contextvars()
    return response
