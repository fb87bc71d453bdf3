"""Breed catalogue maintenance."""

from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from market.services._shared.base import BaseService
from market.services._shared.errors import (
    ConflictError,
    NotFoundError,
    ValidationFailedError,
    is_foreign_key_violation,
)
from market.services.listings.dto import BreedOut

log = logging.getLogger(__name__)

MISSING_NAME_MESSAGE = "Please provide the breed name."


class BreedService(BaseService):
    """Application service for the breed catalogue."""

    def list_breeds(self) -> list[BreedOut]:
        with self.ro_uow() as uow:
            return [BreedOut(id=b.id, name=b.name) for b in uow.breeds.list(sort=["name"])]

    def create(self, name: str | None) -> BreedOut:
        """
        Add a breed.

        :raises ValidationFailedError: When ``name`` is missing or blank.
        """
        if name is None or not name.strip():
            raise ValidationFailedError(MISSING_NAME_MESSAGE)
        with self.rw_uow() as uow:
            breed = uow.breeds.add(uow.breeds.model(name=name.strip()))
            return BreedOut(id=breed.id, name=breed.name)

    def rename(self, breed_id: int, name: str | None) -> BreedOut:
        """
        Rename a breed.

        :raises ValidationFailedError: When ``name`` is missing or blank.
        :raises NotFoundError: If the breed does not exist.
        """
        if name is None or not name.strip():
            raise ValidationFailedError(MISSING_NAME_MESSAGE)
        with self.rw_uow() as uow:
            breed = uow.breeds.get(breed_id)
            if breed is None:
                raise NotFoundError("Breed", breed_id)
            uow.breeds.update(breed, name=name.strip())
            return BreedOut(id=breed.id, name=breed.name)

    def delete(self, breed_id: int) -> BreedOut:
        """
        Remove a breed that no listing references.

        :raises NotFoundError: If the breed does not exist.
        :raises ConflictError: When listings still use the breed.
        """
        with self.rw_uow() as uow:
            breed = uow.breeds.get(breed_id)
            if breed is None:
                raise NotFoundError("Breed", breed_id)
            out = BreedOut(id=breed.id, name=breed.name)
            try:
                uow.breeds.delete(breed)
            except IntegrityError as exc:
                if is_foreign_key_violation(exc):
                    raise ConflictError("Breed", "Breed is used by existing listings.") from exc
                raise

        log.info("breed.deleted", extra={"breed_id": breed_id})
        return out
