"""Run the HTTP server: ``python -m users_app``."""

from __future__ import annotations

import uvicorn

from users_app.core.config import Settings
from users_app.main import create_app


def main() -> None:
    settings = Settings()
    app = create_app(settings)
    # uvicorn drains in-flight requests on SIGINT/SIGTERM, then the lifespan disposes the pool
    uvicorn.run(
        app,
        host=settings.http_host,
        port=settings.http_port,
        timeout_keep_alive=settings.http_keepalive_timeout_seconds,
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
        log_config=None,
    )


if __name__ == "__main__":
    main()
