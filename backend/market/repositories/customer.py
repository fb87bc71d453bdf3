"""Customer repository."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select

from market.models.customer import Customer
from market.repositories.base import BaseRepository


class CustomerRepository(BaseRepository[Customer]):
    """Persistence-only repository for :class:`Customer`, keyed by national id."""

    model = Customer

    def _sortable_fields(self):
        return {"name": Customer.name, "created_at": Customer.created_at}

    def _filterable_fields(self):
        return {"national_id": Customer.national_id}

    def _updatable_fields(self):
        # national_id is immutable once set
        return {"name", "phone", "password_hash"}

    def get_by_national_id(self, national_id: str) -> Customer | None:
        """Fetch a customer by national id (surrounding whitespace ignored).

        :param national_id: Customer national id (CPF).
        :type national_id: str
        :returns: Customer or ``None`` when not found.
        :rtype: Customer | None
        """
        stmt = select(Customer).where(Customer.national_id == national_id.strip())
        return cast(Customer | None, self.session.execute(stmt).scalars().first())

    def get_by_identity(self, value: str) -> Customer | None:
        return self.get_by_national_id(value)

    def update_password_hash(self, customer: Customer, password_hash: str) -> Customer:
        return self.update(customer, password_hash=password_hash)
