"""Administrator account model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from market.core.extensions import db

from .account import AccountMixin
from .base import ReprMixin, TimestampMixin, UUIDPKMixin

if TYPE_CHECKING:
    from .listing import Listing


class Admin(UUIDPKMixin, AccountMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Administrator: publishes listings and answers proposals.

    Identity is the ``email`` (stored lowercased/trimmed, unique).
    """

    __tablename__ = "admins"

    email: Mapped[str] = mapped_column(String(254), nullable=False)

    listings: Mapped[list[Listing]] = relationship(back_populates="admin")

    __table_args__ = (
        UniqueConstraint("email", name="uq_admins_email"),
    )

    @validates("email")
    def _normalize_email(self, key: str, value: str) -> str:
        """
        Normalize and sanity-check the email.

        :raises ValueError: If email is missing or malformed.
        """
        if not value or not isinstance(value, str):
            raise ValueError("Email is required.")
        v = value.strip().lower()
        # Minimal sanity check; full validation happens at API layer.
        if "@" not in v or "." not in v.split("@")[-1]:
            raise ValueError("Email format looks invalid.")
        return v
