import structlog
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from users_app.schemas.common import ErrorResponse, OkResponse
from users_app.services.health import HealthService

router = APIRouter(prefix="/readyz", tags=["health"])


@router.get(
    "",
    response_model=OkResponse,
    responses={503: {"model": ErrorResponse}},
    summary="Readiness probe",
    description="SELECT 1 against the database; 503 until startup migrations finished.",
)
async def readyz(request: Request):
    if not getattr(request.app.state, "ready", False):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"message": "database migrations are still running"},
        )

    svc = HealthService(request.app.state.engine)
    try:
        return await svc.ok()
    except Exception:
        structlog.get_logger(__name__).warning("readyz_database_unavailable", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"message": "database unavailable"},
        )
