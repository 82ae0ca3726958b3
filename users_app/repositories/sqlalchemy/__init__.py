"""SQLAlchemy implementations of repository interfaces."""

from .user import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemyUserRepository",
]
