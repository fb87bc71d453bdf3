"""Unit of Work contract shared by the read-write and read-only scopes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from market.repositories import (
        AdminRepository,
        BreedRepository,
        CustomerRepository,
        ListingRepository,
        ProposalRepository,
    )


class UnitOfWork(ABC):
    """
    One transactional scope over the marketplace repositories.

    Every repository attribute is bound to the same session, so a service
    sees its own writes across accounts, breeds, listings and proposals.
    Rows must be converted to DTOs before the scope exits.
    """

    admins: AdminRepository
    customers: CustomerRepository
    breeds: BreedRepository
    listings: ListingRepository
    proposals: ProposalRepository

    @abstractmethod
    def __enter__(self) -> UnitOfWork: ...

    @abstractmethod
    def __exit__(self, exc_type, exc, tb) -> None: ...

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...
