"""
DTOs for AccountService.

Input DTOs accept ``None`` for every field: presence is checked by the
service so the caller gets the kind-specific "please provide" message.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

# --------------------------------------------------------------------------- #
# Input DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class RegistrationIn:
    """
    Input DTO for account registration.

    :param name: Display name.
    :type name: str | None
    :param identity: Email (admin) or national id (customer).
    :type identity: str | None
    :param phone: Phone in any formatting.
    :type phone: str | None
    :param password: Raw password; hashed before it reaches the store.
    :type password: str | None
    """

    name: str | None = None
    identity: str | None = None
    phone: str | None = None
    password: str | None = None


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for authentication.

    :param identity: Email (admin) or national id (customer).
    :type identity: str | None
    :param password: Raw password.
    :type password: str | None
    """

    identity: str | None = None
    password: str | None = None


@dataclass(frozen=True, slots=True)
class PasswordResetIn:
    """
    Input DTO for overwriting a password.

    :param identity: Identity of the account to update.
    :type identity: str
    :param password: New raw password.
    :type password: str | None
    """

    identity: str
    password: str | None = None


# --------------------------------------------------------------------------- #
# Output DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class AccountOut:
    """
    Public-safe account profile (never carries the password hash).

    :param id: Account identifier.
    :type id: str
    :param kind: Account kind name.
    :type kind: str
    :param name: Display name.
    :type name: str
    :param phone: Canonical phone.
    :type phone: str
    :param email: Administrator email.
    :type email: str | None
    :param national_id: Customer national id.
    :type national_id: str | None
    :param created_at: Creation timestamp.
    :type created_at: datetime | None
    """

    id: str
    kind: str
    name: str
    phone: str
    email: str | None = None
    national_id: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class LoginOut:
    """
    Result of a successful login.

    :param account: Authenticated profile.
    :type account: AccountOut
    :param token: Session token (administrators only).
    :type token: str | None
    """

    account: AccountOut
    token: str | None = None
