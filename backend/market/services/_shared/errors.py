"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP. They serve as stable contracts between repositories, domain
policies, and application services.

The translation to HTTP responses (RFC 7807) is handled by
``market/core/errors.py`` via ``BaseService.translate_exceptions()``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError


def violates(exc: IntegrityError, constraint_name: str, *, column: str | None = None) -> bool:
    """
    Check whether an IntegrityError originates from a specific constraint.

    PostgreSQL reports the constraint name in the message; SQLite only
    reports ``table.column``, so the optional ``column`` (``"table.column"``)
    is matched as a fallback.

    Parameters
    ----------
    exc : IntegrityError
        The exception raised by SQLAlchemy during flush/commit.
    constraint_name : str
        The name of the database constraint to match (e.g., 'uq_admins_email').
    column : str | None
        Qualified column reported by dialects that omit constraint names.

    Returns
    -------
    bool
        True if the IntegrityError matches the given constraint.
    """
    message = str(exc.orig).lower() if exc.orig else str(exc).lower()
    if constraint_name.lower() in message:
        return True
    return column is not None and "unique" in message and column.lower() in message


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """Return ``True`` when the IntegrityError comes from a foreign key."""
    message = str(exc.orig).lower() if exc.orig else str(exc).lower()
    return "foreign key" in message


# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - They can be safely raised from repositories or domain logic.
    - The API layer translates them to APIError through BaseService.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


class ValidationFailedError(ServiceError):
    """Raised when required input is missing or malformed."""


class PolicyViolationError(ServiceError):
    """
    Raised when a value breaks one or more policy rules.

    Every violated rule is reported, joined with ``"; "`` in the message.

    :param violations: Ordered, human-readable rule violations.
    :type violations: Sequence[str]
    """

    def __init__(self, violations: Iterable[str]) -> None:
        self.violations: list[str] = list(violations)
        super().__init__("; ".join(self.violations))


class AuthenticationError(ServiceError):
    """
    Raised when credentials cannot be verified.

    The message is deliberately identical for every root cause (missing field,
    unknown identity, wrong password).
    """


class InvalidSessionError(ServiceError):
    """Raised when a session token is missing, expired, or forged."""

    def __init__(self, message: str = "Invalid or expired session token") -> None:
        super().__init__(message)


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the repository.

    :param entity: Entity name (e.g., "Customer").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class ConflictError(ServiceError):
    """
    Raised when a unique constraint or business rule conflict occurs.

    :param entity: Entity name (e.g., "Admin").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    :param field: Name of the duplicated field, when known.
    :type field: str | None
    """

    entity: str
    detail: str
    field: str | None = None

    def __str__(self) -> str:
        return self.detail


@dataclass(slots=True)
class InvalidReferenceError(ServiceError):
    """
    Raised when a payload points to related rows that do not exist.

    :param fields: Reference fields that were supplied.
    :type fields: Sequence[str]
    """

    fields: Sequence[str]

    def __str__(self) -> str:
        return f"Invalid reference; check that {', '.join(self.fields)} exist."
