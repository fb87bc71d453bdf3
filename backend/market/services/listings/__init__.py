from market.services.listings.search import (
    PriceCeilingQuery,
    SearchQuery,
    TextQuery,
    classify_search_term,
)
from market.services.listings.service import DEFAULT_PHOTO, ListingService

__all__ = [
    "DEFAULT_PHOTO",
    "ListingService",
    "PriceCeilingQuery",
    "SearchQuery",
    "TextQuery",
    "classify_search_term",
]
