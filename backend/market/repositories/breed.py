"""Breed repository."""

from __future__ import annotations

from market.models.breed import Breed
from market.repositories.base import BaseRepository


class BreedRepository(BaseRepository[Breed]):
    model = Breed

    def _sortable_fields(self):
        return {"name": Breed.name}

    def _filterable_fields(self):
        return {"name": Breed.name}

    def _updatable_fields(self):
        return {"name"}
