from __future__ import annotations

import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_app.core import exceptions as domain_exceptions

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, message: str, exc: BaseException) -> JSONResponse:
    cause = exc.__cause__
    logger.error(
        "api_error",
        status=status_code,
        error=str(exc) or exc.__class__.__name__,
        cause=repr(cause) if cause is not None else None,
    )
    return JSONResponse(status_code=status_code, content={"message": message})


def _http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Routing errors (unknown path, wrong method) in the same body shape
    response = _error_response(exc.status_code, str(exc.detail), exc)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def _validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(400, "failed to decode request body", exc)


def _response_validation_handler(_: Request, exc: ResponseValidationError) -> JSONResponse:
    # Encoding our own response failed; report the encoder's text
    return _error_response(500, str(exc), exc)


def _unhandled_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "internal server error"})


def _domain_error_handler(status_code: int, default_message: str):
    def _handler(_: Request, exc: domain_exceptions.DomainError) -> JSONResponse:
        return _error_response(status_code, str(exc) or default_message, exc)

    return _handler


def install(app) -> None:
    # Register centralized exception handlers
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(ResponseValidationError, _response_validation_handler)
    app.add_exception_handler(
        domain_exceptions.InvalidInputError, _domain_error_handler(400, "bad request")
    )
    app.add_exception_handler(
        domain_exceptions.NotFoundError, _domain_error_handler(404, "user not found")
    )
    app.add_exception_handler(
        domain_exceptions.AlreadyExistsError, _domain_error_handler(409, "user already exists")
    )
    app.add_exception_handler(
        domain_exceptions.StoreUnavailableError,
        _domain_error_handler(500, "internal server error"),
    )
    app.add_exception_handler(Exception, _unhandled_exception_handler)
