"""
Search-term classification for the listing storefront.

A single free-text term is either a price ceiling (it parses as a number)
or a case-insensitive text fragment matched against category and breed.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


@dataclass(frozen=True, slots=True)
class PriceCeilingQuery:
    """Listings priced at or below ``max_price``."""

    max_price: Decimal


@dataclass(frozen=True, slots=True)
class TextQuery:
    """Listings whose category or breed name contains ``text`` (lowercased)."""

    text: str


SearchQuery = PriceCeilingQuery | TextQuery


def classify_search_term(term: str) -> SearchQuery:
    """
    Decide which search branch ``term`` belongs to.

    Surrounding whitespace is ignored. ``"450"``, ``"1e3"`` and
    ``"Infinity"`` are numeric; ``"NaN"`` is treated as text. A blank term
    reads as zero, so it only matches listings priced at or below zero.

    :param term: Raw search term from the request path.
    :type term: str
    :returns: The query to run.
    :rtype: PriceCeilingQuery | TextQuery
    """
    stripped = term.strip()
    if not stripped:
        return PriceCeilingQuery(Decimal(0))
    try:
        value = Decimal(stripped)
    except InvalidOperation:
        return TextQuery(stripped.lower())
    if value.is_nan():
        return TextQuery(stripped.lower())
    return PriceCeilingQuery(value)
