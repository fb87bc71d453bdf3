from market.models.admin import Admin
from market.models.breed import Breed
from market.models.customer import Customer
from market.models.listing import Listing
from market.models.proposal import Proposal

__all__ = [
    "Admin",
    "Breed",
    "Customer",
    "Listing",
    "Proposal",
]
