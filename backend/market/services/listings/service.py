"""
ListingService
==============

Storefront queries and administrator maintenance for listings:
- Search dispatch (price ceiling vs. text) on a single term
- Default photo substitution on every read
- Create/update/delete with foreign-key failures reported as bad references
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any

from sqlalchemy.exc import IntegrityError

from market.services._shared.base import BaseService
from market.services._shared.errors import (
    InvalidReferenceError,
    NotFoundError,
    ValidationFailedError,
    is_foreign_key_violation,
)
from market.services.listings.dto import BreedOut, ListingIn, ListingOut, ListingUpdateIn
from market.services.listings.search import PriceCeilingQuery, classify_search_term

log = logging.getLogger(__name__)

DEFAULT_PHOTO = "/default-image.jpg"
REQUIRED_LISTING_FIELDS = (
    "category",
    "age",
    "price",
    "weight",
    "details",
    "photo",
    "sex",
    "breed_id",
    "admin_id",
)
MISSING_LISTING_FIELDS_MESSAGE = "Please provide every required listing field: " + ", ".join(
    REQUIRED_LISTING_FIELDS
) + "."
MISSING_UPDATE_FIELDS_MESSAGE = "Please provide sex and breed_id."


def _missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def to_listing_out(row: Any, default_photo: str = DEFAULT_PHOTO) -> ListingOut:
    """Build the public representation of a listing row."""
    breed = row.breed
    return ListingOut(
        id=row.id,
        category=row.category,
        age=row.age,
        price=row.price,
        weight=row.weight,
        details=row.details,
        featured=row.featured,
        photo=row.photo or default_photo,
        sex=row.sex,
        breed_id=row.breed_id,
        admin_id=row.admin_id,
        breed=BreedOut(id=breed.id, name=breed.name) if breed is not None else None,
        created_at=row.created_at,
    )


class ListingService(BaseService):
    """
    Application service for listings.

    :param default_photo: Photo reference served for listings without one.
    :type default_photo: str
    """

    def __init__(self, *, default_photo: str = DEFAULT_PHOTO) -> None:
        self.default_photo = default_photo

    def _to_out(self, row: Any) -> ListingOut:
        return to_listing_out(row, self.default_photo)

    # --------------------------------------------------------------------- #
    # Queries
    # --------------------------------------------------------------------- #

    def search(self, term: str) -> list[ListingOut]:
        """
        Run the storefront search for a single free-text term.

        A numeric term returns listings priced at or below it; anything
        else matches category or breed name, case-insensitively.

        :param term: Raw search term.
        :type term: str
        :returns: Matching listings with the photo placeholder applied.
        :rtype: list[ListingOut]
        """
        query = classify_search_term(term)
        with self.ro_uow() as uow:
            if isinstance(query, PriceCeilingQuery):
                rows = uow.listings.search_by_max_price(query.max_price)
            else:
                rows = uow.listings.search_by_text(query.text)
            return [self._to_out(row) for row in rows]

    def list_listings(self) -> list[ListingOut]:
        with self.ro_uow() as uow:
            return [self._to_out(row) for row in uow.listings.list()]

    def get(self, listing_id: int) -> ListingOut:
        """
        Retrieve one listing with its breed.

        :raises NotFoundError: If the listing does not exist.
        """
        with self.ro_uow() as uow:
            row = uow.listings.get(listing_id)
            if row is None:
                raise NotFoundError("Listing", listing_id)
            return self._to_out(row)

    # --------------------------------------------------------------------- #
    # Commands
    # --------------------------------------------------------------------- #

    def create(self, dto: ListingIn) -> ListingOut:
        """
        Publish a listing.

        :param dto: Listing fields.
        :type dto: ListingIn
        :returns: Created listing.
        :rtype: ListingOut
        :raises ValidationFailedError: When a required field is missing.
        :raises InvalidReferenceError: When breed or admin do not exist.
        """
        if any(_missing(getattr(dto, name)) for name in REQUIRED_LISTING_FIELDS):
            raise ValidationFailedError(MISSING_LISTING_FIELDS_MESSAGE)

        with self.rw_uow() as uow:
            row = uow.listings.model(**asdict(dto))
            try:
                uow.listings.add(row)
            except IntegrityError as exc:
                if is_foreign_key_violation(exc):
                    raise InvalidReferenceError(("breed_id", "admin_id")) from exc
                raise
            out = self._to_out(row)

        log.info("listing.created", extra={"listing_id": out.id})
        return out

    def update(self, listing_id: int, dto: ListingUpdateIn) -> ListingOut:
        """
        Change sex, breed and photo of a listing.

        A missing photo is replaced by the default placeholder.

        :raises ValidationFailedError: When sex or breed are missing.
        :raises NotFoundError: If the listing does not exist.
        :raises InvalidReferenceError: When the breed does not exist.
        """
        if _missing(dto.sex) or dto.breed_id is None:
            raise ValidationFailedError(MISSING_UPDATE_FIELDS_MESSAGE)

        with self.rw_uow() as uow:
            row = uow.listings.get(listing_id)
            if row is None:
                raise NotFoundError("Listing", listing_id)
            try:
                uow.listings.update(
                    row,
                    sex=dto.sex,
                    breed_id=dto.breed_id,
                    photo=dto.photo or self.default_photo,
                )
            except IntegrityError as exc:
                if is_foreign_key_violation(exc):
                    raise InvalidReferenceError(("breed_id",)) from exc
                raise
            uow.session.refresh(row)
            out = self._to_out(row)

        log.info("listing.updated", extra={"listing_id": listing_id})
        return out

    def delete(self, listing_id: int) -> ListingOut:
        """
        Remove a listing (and its proposals).

        :returns: The removed listing.
        :raises NotFoundError: If the listing does not exist.
        """
        with self.rw_uow() as uow:
            row = uow.listings.get(listing_id)
            if row is None:
                raise NotFoundError("Listing", listing_id)
            out = self._to_out(row)
            uow.listings.delete(row)

        log.info("listing.deleted", extra={"listing_id": listing_id})
        return out
