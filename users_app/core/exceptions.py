"""Domain-level exception hierarchy for service and repository layers."""

from __future__ import annotations


class DomainError(Exception):
    """Base class for domain-specific failures."""


class InvalidInputError(DomainError):
    """Raised when a request carries a missing or malformed identifier or body."""


class NotFoundError(DomainError):
    """Raised when a requested user does not exist."""


class AlreadyExistsError(DomainError):
    """Raised when a uniqueness constraint (email) is violated."""


class StoreUnavailableError(DomainError):
    """Raised for any other persistence failure (connectivity, timeout, constraint)."""


class StartupError(RuntimeError):
    """Raised when the process cannot start serving (store, migrations)."""
