"""Proposal repository."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.orm import joinedload

from market.models.proposal import Proposal
from market.repositories.base import BaseRepository


class ProposalRepository(BaseRepository[Proposal]):
    """Persistence-only repository for :class:`Proposal`.

    Proposals are always loaded with their customer and listing so that
    serializers never trigger lazy loads.
    """

    model = Proposal

    def _default_eagerload(self, stmt: Select[Any]) -> Select[Any]:
        return stmt.options(joinedload(Proposal.customer), joinedload(Proposal.listing))

    def _sortable_fields(self):
        return {"created_at": Proposal.created_at}

    def _filterable_fields(self):
        return {"customer_id": Proposal.customer_id, "listing_id": Proposal.listing_id}

    def _updatable_fields(self):
        return {"answer"}

    def list_for_customer(self, customer_id: str) -> list[Proposal]:
        stmt = self._default_eagerload(
            select(Proposal).where(Proposal.customer_id == customer_id)
        ).order_by(Proposal.id.asc())
        return list(self.session.execute(stmt).unique().scalars().all())
