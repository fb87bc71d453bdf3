"""
DTOs for ListingService and BreedService.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class BreedOut:
    """
    Public breed representation.

    :param id: Breed identifier.
    :type id: int
    :param name: Breed name.
    :type name: str
    """

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class ListingIn:
    """
    Input DTO for publishing a listing.

    Every field except ``featured`` is mandatory; ``None`` marks it missing.
    """

    category: str | None = None
    age: int | None = None
    price: Decimal | None = None
    weight: Decimal | None = None
    details: str | None = None
    photo: str | None = None
    sex: str | None = None
    breed_id: int | None = None
    admin_id: str | None = None
    featured: bool = False


@dataclass(frozen=True, slots=True)
class ListingUpdateIn:
    """
    Input DTO for updating a listing.

    :param sex: New sex (required).
    :type sex: str | None
    :param breed_id: New breed (required).
    :type breed_id: int | None
    :param photo: New photo; ``None`` stores the default placeholder.
    :type photo: str | None
    """

    sex: str | None = None
    breed_id: int | None = None
    photo: str | None = None


@dataclass(frozen=True, slots=True)
class ListingOut:
    """
    Public listing representation, photo placeholder already applied.
    """

    id: int
    category: str
    age: int
    price: Decimal
    weight: Decimal
    details: str
    featured: bool
    photo: str
    sex: str
    breed_id: int
    admin_id: str
    breed: BreedOut | None = None
    created_at: datetime | None = None
