from __future__ import annotations

import anyio
import structlog
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send


class RequestDeadlineMiddleware:
    """Bound every HTTP request by a deadline.

    Expiry cancels the downstream task, which aborts any in-flight database
    await (the unit of work then rolls back), and answers 500 unless the
    response has already started.
    """

    def __init__(self, app: ASGIApp, timeout_seconds: float) -> None:
        self.app = app
        self.timeout_seconds = timeout_seconds

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or not self.timeout_seconds:
            await self.app(scope, receive, send)
            return

        response_started = False

        async def _send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            with anyio.fail_after(self.timeout_seconds):
                await self.app(scope, receive, _send)
        except TimeoutError:
            structlog.get_logger(__name__).error(
                "request_timed_out",
                status=500,
                timeout_seconds=self.timeout_seconds,
                response_started=response_started,
            )
            if response_started:
                return
            response = JSONResponse(status_code=500, content={"message": "request timed out"})
            await response(scope, receive, send)
