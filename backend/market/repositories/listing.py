"""Listing repository with the search queries used by the storefront."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from sqlalchemy import Select, func, or_, select
from sqlalchemy.orm import joinedload

from market.models.breed import Breed
from market.models.listing import Listing
from market.repositories.base import BaseRepository


class ListingRepository(BaseRepository[Listing]):
    """Persistence-only repository for :class:`Listing`."""

    model = Listing

    def _default_eagerload(self, stmt: Select[Any]) -> Select[Any]:
        return stmt.options(joinedload(Listing.breed))

    def _sortable_fields(self):
        return {"price": Listing.price, "age": Listing.age, "created_at": Listing.created_at}

    def _filterable_fields(self):
        return {
            "admin_id": Listing.admin_id,
            "breed_id": Listing.breed_id,
            "featured": Listing.featured,
        }

    def _updatable_fields(self):
        return {
            "category",
            "age",
            "price",
            "weight",
            "details",
            "featured",
            "photo",
            "sex",
            "breed_id",
        }

    def search_by_max_price(self, max_price: Decimal) -> list[Listing]:
        """Return listings priced at or below ``max_price``, cheapest first.

        :param max_price: Inclusive price ceiling.
        :type max_price: Decimal
        :rtype: list[Listing]
        """
        stmt = self._default_eagerload(
            select(Listing).where(Listing.price <= max_price)
        ).order_by(Listing.price.asc(), Listing.id.asc())
        return list(self.session.execute(stmt).unique().scalars().all())

    def search_by_text(self, term: str) -> list[Listing]:
        """Return listings whose category or breed name contains ``term``.

        Matching is case-insensitive; ``term`` is expected lowercased.

        :param term: Lowercased substring.
        :type term: str
        :rtype: list[Listing]
        """
        stmt = (
            select(Listing)
            .outerjoin(Breed, Listing.breed_id == Breed.id)
            .where(
                or_(
                    func.lower(Listing.category).contains(term, autoescape=True),
                    func.lower(Breed.name).contains(term, autoescape=True),
                )
            )
            .options(joinedload(Listing.breed))
            .order_by(Listing.id.asc())
        )
        return list(self.session.execute(stmt).unique().scalars().all())
