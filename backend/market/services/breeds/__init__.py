from market.services.breeds.service import BreedService

__all__ = ["BreedService"]
