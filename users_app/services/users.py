"""User use cases backed by the repository interface."""

from __future__ import annotations

import uuid
from collections.abc import Callable

from users_app.infra.unit_of_work import UnitOfWork
from users_app.repositories.interfaces import User

UnitOfWorkFactory = Callable[[], UnitOfWork]


class UserService:
    """Pass-through boundary between the HTTP layer and persistence.

    Errors raised by the repository (``NotFoundError``, ``AlreadyExistsError``,
    ``StoreUnavailableError``) propagate unchanged.
    """

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def get_user_by_id(self, user_id: uuid.UUID) -> User:
        async with self._uow_factory() as uow:
            return await uow.users.get_by_id(user_id)

    async def create_user(self, user: User) -> None:
        async with self._uow_factory() as uow:
            await uow.users.create(user)

    async def update_user(self, user: User) -> None:
        async with self._uow_factory() as uow:
            await uow.users.update(user)

    async def delete_user(self, user_id: uuid.UUID) -> None:
        async with self._uow_factory() as uow:
            await uow.users.delete(user_id)
