"""Liveness endpoint for process supervisors."""

from fastapi import APIRouter

from users_app.schemas.common import OkResponse

router = APIRouter(prefix="/healthz", tags=["health"])


@router.get(
    "",
    response_model=OkResponse,
    summary="Report that the users API process is serving requests",
    description=(
        "Answers as soon as the HTTP server accepts connections. The database is "
        "not consulted here; use /readyz to check that PostgreSQL is reachable."
    ),
)
async def healthz() -> OkResponse:
    return OkResponse(ok=True)
