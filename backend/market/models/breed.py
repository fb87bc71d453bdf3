"""Cattle breed model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from market.core.extensions import db

from .base import PKMixin, ReprMixin

if TYPE_CHECKING:
    from .listing import Listing


class Breed(PKMixin, ReprMixin, db.Model):
    """Breed catalogue entry (e.g. "nelore", "angus")."""

    __tablename__ = "breeds"

    name: Mapped[str] = mapped_column(String(60), nullable=False)

    # Rows referencing a breed block its deletion at the database level.
    listings: Mapped[list[Listing]] = relationship(back_populates="breed", passive_deletes="all")
