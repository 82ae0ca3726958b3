"""Map request DTOs onto domain users.

Responses need no mapper: the routers return ``User`` rows directly and
FastAPI validates them against ``UserDTO``.
"""

from __future__ import annotations

from users_app.dto import UserDTO
from users_app.repositories.interfaces import User


def user_from_dto(dto: UserDTO) -> User:
    return User(
        id=dto.id,
        name=dto.name,
        email=dto.email,
        age=dto.age,
        balance=dto.balance,
    )
