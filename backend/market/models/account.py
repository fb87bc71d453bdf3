"""Columns and guards shared by the two account kinds."""

from __future__ import annotations

from typing import Any

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, validates


class AccountMixin:
    """
    Login identity columns common to administrators and customers.

    Fields
    ------
    name : str
        Display name.
    phone : str
        Canonical phone (``+55`` followed by 10 or 11 digits).
    password_hash : str
        bcrypt hash; plaintext passwords are never assigned to the model.
    """

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)

    @property
    def password(self) -> Any:
        """
        Disallow plaintext password access in both directions.

        :raises AttributeError: Always; hash through the credential hasher.
        """
        raise AttributeError("Plaintext passwords are not stored; set password_hash instead.")

    @validates("name")
    def _normalize_name(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Name is required.")
        return value.strip()

    @validates("phone")
    def _check_canonical_phone(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not value.startswith("+") or not value[1:].isdigit():
            raise ValueError("Phone must be stored in canonical form.")
        return value
