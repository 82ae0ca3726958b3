"""API dependency helpers and service providers."""

from __future__ import annotations

import uuid

from fastapi import Query, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from users_app.core.exceptions import InvalidInputError
from users_app.infra.unit_of_work import SqlAlchemyUnitOfWork
from users_app.services.users import UserService

__all__ = [
    "get_session_factory",
    "get_user_id_from_query",
    "get_user_service",
]


def get_user_id_from_query(
    raw_id: str | None = Query(None, alias="id", description="User id (UUID)"),
) -> uuid.UUID:
    """Parse the `id` query parameter; empty and malformed values are client errors."""
    if not raw_id:
        raise InvalidInputError("id is empty")
    try:
        return uuid.UUID(raw_id)
    except ValueError as exc:
        raise InvalidInputError(f"invalid user id: {raw_id}") from exc


# --- Service providers for DI ---


def get_session_factory(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.session_factory


def get_user_service(request: Request) -> UserService:
    session_factory = get_session_factory(request)
    return UserService(lambda: SqlAlchemyUnitOfWork(session_factory))
