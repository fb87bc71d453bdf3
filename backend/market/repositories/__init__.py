"""Repository layer exports."""

from .admin import AdminRepository
from .base import BaseRepository
from .breed import BreedRepository
from .customer import CustomerRepository
from .listing import ListingRepository
from .proposal import ProposalRepository

__all__ = [
    "AdminRepository",
    "BaseRepository",
    "BreedRepository",
    "CustomerRepository",
    "ListingRepository",
    "ProposalRepository",
]
