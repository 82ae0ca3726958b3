"""Repository abstractions for the service layer."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol


@dataclass(frozen=True)
class User:
    id: uuid.UUID
    name: str
    email: str
    age: int
    balance: Decimal


class UserRepository(Protocol):
    """Persistence boundary for user records.

    Implementations translate engine signals into the domain taxonomy:
    ``NotFoundError`` when no row matched, ``AlreadyExistsError`` on a unique
    violation during create, ``StoreUnavailableError`` for anything else.
    """

    async def get_by_id(self, user_id: uuid.UUID) -> User: ...

    async def create(self, user: User) -> None: ...

    async def update(self, user: User) -> None: ...

    async def delete(self, user_id: uuid.UUID) -> None: ...
