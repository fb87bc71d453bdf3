"""Purchase proposal model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from market.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin

if TYPE_CHECKING:
    from .customer import Customer
    from .listing import Listing


class Proposal(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """A customer's offer on a listing, optionally answered by an administrator."""

    __tablename__ = "proposals"

    description: Mapped[str] = mapped_column(Text, nullable=False)
    answer: Mapped[str | None] = mapped_column(Text, nullable=True)

    customer_id: Mapped[str] = mapped_column(ForeignKey("customers.id"), nullable=False)
    listing_id: Mapped[int] = mapped_column(ForeignKey("listings.id"), nullable=False)

    customer: Mapped[Customer] = relationship(back_populates="proposals")
    listing: Mapped[Listing] = relationship(back_populates="proposals")
