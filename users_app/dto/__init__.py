"""Public DTO exports for FastAPI request/response models."""

from .user import UserDTO

__all__ = [
    "UserDTO",
]
