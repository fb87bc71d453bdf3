"""Customer account model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship, validates

from market.core.extensions import db

from .account import AccountMixin
from .base import ReprMixin, TimestampMixin, UUIDPKMixin

if TYPE_CHECKING:
    from .proposal import Proposal


class Customer(UUIDPKMixin, AccountMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Customer: browses listings and submits purchase proposals.

    Identity is the ``national_id`` (CPF, 11 digits), unique and immutable
    once set.
    """

    __tablename__ = "customers"

    national_id: Mapped[str] = mapped_column(String(14), nullable=False)

    proposals: Mapped[list[Proposal]] = relationship(back_populates="customer")

    __table_args__ = (UniqueConstraint("national_id", name="uq_customers_national_id"),)

    @validates("national_id")
    def _freeze_national_id(self, key: str, value: str) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("National id is required.")
        current = self.__dict__.get("national_id")
        if current is not None and current != value.strip():
            raise ValueError("National id cannot be changed once set.")
        return value.strip()
