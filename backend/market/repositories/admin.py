"""Administrator repository."""

from __future__ import annotations

from typing import cast

from sqlalchemy import select

from market.models.admin import Admin
from market.repositories.base import BaseRepository


class AdminRepository(BaseRepository[Admin]):
    """Persistence-only repository for :class:`Admin`.

    Lookups are keyed by the normalized email. Uniqueness is left to the
    ``uq_admins_email`` constraint; there is no lookup-before-insert helper.
    """

    model = Admin

    def _sortable_fields(self):
        return {"name": Admin.name, "email": Admin.email, "created_at": Admin.created_at}

    def _filterable_fields(self):
        return {"email": Admin.email}

    def _updatable_fields(self):
        return {"name", "phone", "password_hash"}

    def get_by_email(self, email: str) -> Admin | None:
        """Fetch an administrator by email (case-insensitive).

        :param email: Email address to normalise and search.
        :type email: str
        :returns: Admin instance or ``None`` when not found.
        :rtype: Admin | None
        """
        stmt = select(Admin).where(Admin.email == email.lower().strip())
        return cast(Admin | None, self.session.execute(stmt).scalars().first())

    def get_by_identity(self, value: str) -> Admin | None:
        return self.get_by_email(value)

    def update_password_hash(self, admin: Admin, password_hash: str) -> Admin:
        return self.update(admin, password_hash=password_hash)
