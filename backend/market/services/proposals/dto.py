"""
DTOs for ProposalService.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from market.services.listings.dto import ListingOut


@dataclass(frozen=True, slots=True)
class ProposalIn:
    """
    Input DTO for submitting a proposal.

    :param customer_id: Proposing customer.
    :type customer_id: str | None
    :param listing_id: Target listing.
    :type listing_id: int | None
    :param description: Offer text.
    :type description: str | None
    """

    customer_id: str | None = None
    listing_id: int | None = None
    description: str | None = None


@dataclass(frozen=True, slots=True)
class CustomerContactOut:
    """Customer fields administrators need to reply to a proposal."""

    id: str
    name: str
    national_id: str
    phone: str


@dataclass(frozen=True, slots=True)
class ProposalOut:
    """
    Public proposal representation.

    ``customer`` and ``listing`` are filled by the listing endpoints that
    include related data.
    """

    id: int
    customer_id: str
    listing_id: int
    description: str
    answer: str | None
    created_at: datetime | None = None
    customer: CustomerContactOut | None = None
    listing: ListingOut | None = None
