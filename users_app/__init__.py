"""users-app: CRUD service for user records backed by PostgreSQL."""

__all__ = []
