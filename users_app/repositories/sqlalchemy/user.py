"""SQLAlchemy implementation of the user repository."""

from __future__ import annotations

import asyncio
import uuid
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from users_app.core.exceptions import AlreadyExistsError, NotFoundError, StoreUnavailableError
from users_app.models import PRIMARY_KEY_CONSTRAINT, UserModel
from users_app.repositories.interfaces import User, UserRepository

UNIQUE_VIOLATION = "23505"

# asyncpg raises asyncio.TimeoutError (command_timeout) and OSError untranslated.
STORE_ERRORS: tuple[type[BaseException], ...] = (SQLAlchemyError, OSError, asyncio.TimeoutError)


def _error_attr(exc: SQLAlchemyError, name: str) -> Any:
    orig = getattr(exc, "orig", None)
    for candidate in (orig, getattr(orig, "__cause__", None)):
        value = getattr(candidate, name, None)
        if value:
            return value
    return None


def is_unique_violation(exc: SQLAlchemyError) -> bool:
    code = _error_attr(exc, "sqlstate") or _error_attr(exc, "pgcode")
    return str(code) == UNIQUE_VIOLATION


def violated_constraint(exc: SQLAlchemyError) -> str | None:
    return _error_attr(exc, "constraint_name")


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, user_id: uuid.UUID) -> User:
        stmt = select(
            UserModel.id,
            UserModel.name,
            UserModel.email,
            UserModel.age,
            UserModel.balance,
        ).where(UserModel.id == user_id)
        try:
            row = (await self._session.execute(stmt)).first()
        except STORE_ERRORS as exc:
            raise StoreUnavailableError(f"failed to get user with id {user_id}") from exc

        if row is None:
            raise NotFoundError(f"user with id {user_id} not found")
        return User(
            id=row.id,
            name=row.name,
            email=row.email,
            age=row.age,
            balance=row.balance,
        )

    async def create(self, user: User) -> None:
        stmt = insert(UserModel).values(
            id=user.id,
            name=user.name,
            email=user.email,
            age=user.age,
            balance=user.balance,
        )
        try:
            await self._session.execute(stmt)
        except IntegrityError as exc:
            if not is_unique_violation(exc):
                raise StoreUnavailableError("failed to create user") from exc
            if violated_constraint(exc) == PRIMARY_KEY_CONSTRAINT:
                raise AlreadyExistsError(f"user with id {user.id} already exists") from exc
            raise AlreadyExistsError(f"user with email {user.email} already exists") from exc
        except STORE_ERRORS as exc:
            raise StoreUnavailableError("failed to create user") from exc

    async def update(self, user: User) -> None:
        stmt = (
            update(UserModel)
            .where(UserModel.id == user.id)
            .values(
                name=user.name,
                email=user.email,
                age=user.age,
                balance=user.balance,
            )
        )
        try:
            result = await self._session.execute(stmt)
        except STORE_ERRORS as exc:
            raise StoreUnavailableError(f"failed to update user with id {user.id}") from exc

        if result.rowcount == 0:
            raise NotFoundError(f"user with id {user.id} not found")

    async def delete(self, user_id: uuid.UUID) -> None:
        stmt = delete(UserModel).where(UserModel.id == user_id)
        try:
            result = await self._session.execute(stmt)
        except STORE_ERRORS as exc:
            raise StoreUnavailableError(f"failed to delete user with id {user_id}") from exc

        if result.rowcount == 0:
            raise NotFoundError(f"user with id {user_id} not found")


__all__ = ["SqlAlchemyUserRepository", "is_unique_violation", "violated_constraint"]
