# Alembic discovers tables through this import.
from .base import Base
from .user import EMAIL_UNIQUE_CONSTRAINT, PRIMARY_KEY_CONSTRAINT, UserModel

__all__ = [
    "Base",
    "UserModel",
    "EMAIL_UNIQUE_CONSTRAINT",
    "PRIMARY_KEY_CONSTRAINT",
]
