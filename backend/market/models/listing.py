"""Animal-for-sale listing model."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from market.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .admin import Admin
    from .breed import Breed
    from .proposal import Proposal


class Listing(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    An animal published by an administrator.

    Fields
    ------
    category : str
        Animal type as free text (e.g. "boi", "novilha").
    age : int
        Age in months.
    price : Decimal
        Asking price.
    weight : Decimal
        Weight in kilograms.
    photo : str | None
        Photo reference; ``None`` is served as the configured placeholder.
    """

    __tablename__ = "listings"

    category: Mapped[str] = mapped_column(String(60), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    weight: Mapped[Decimal] = mapped_column(Numeric(8, 2), nullable=False)
    details: Mapped[str] = mapped_column(Text, nullable=False)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    photo: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sex: Mapped[str] = mapped_column(String(10), nullable=False)

    breed_id: Mapped[int] = mapped_column(ForeignKey("breeds.id"), nullable=False)
    admin_id: Mapped[str] = mapped_column(ForeignKey("admins.id"), nullable=False)

    breed: Mapped[Breed] = relationship(back_populates="listings", lazy="joined")
    admin: Mapped[Admin] = relationship(back_populates="listings")
    proposals: Mapped[list[Proposal]] = relationship(
        back_populates="listing", cascade="all, delete-orphan"
    )
