"""Unit tests for breed, listing and proposal maintenance."""

from __future__ import annotations

from decimal import Decimal

import pytest
from market.models import Listing, Proposal
from market.services._shared.errors import (
    ConflictError,
    InvalidReferenceError,
    NotFoundError,
    ValidationFailedError,
)
from market.services.breeds import BreedService
from market.services.listings import DEFAULT_PHOTO, ListingService
from market.services.listings.dto import ListingIn, ListingUpdateIn
from market.services.proposals import ProposalService
from market.services.proposals.dto import ProposalIn
from sqlalchemy import func, select

from tests.factories.accounts import AdminFactory, CustomerFactory
from tests.factories.catalog import BreedFactory, ListingFactory, ProposalFactory


class TestBreedService:
    def test_create_list_rename(self):
        service = BreedService()
        angus = service.create(" Angus ")
        service.create("Nelore")

        assert angus.name == "Angus"
        assert service.rename(angus.id, "Brangus").name == "Brangus"
        assert [b.name for b in service.list_breeds()] == ["Brangus", "Nelore"]

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_name(self, name):
        with pytest.raises(ValidationFailedError, match="Please provide the breed name."):
            BreedService().create(name)

    def test_rename_unknown(self):
        with pytest.raises(NotFoundError):
            BreedService().rename(999, "Gir")

    def test_delete_unused_breed(self, session):
        breed = BreedFactory()
        session.commit()

        BreedService().delete(breed.id)
        assert BreedService().list_breeds() == []

    def test_delete_breed_in_use_conflicts(self, session):
        listing = ListingFactory()
        session.commit()

        with pytest.raises(ConflictError, match="used by existing listings"):
            BreedService().delete(listing.breed_id)


def _listing_in(breed_id, admin_id, **overrides) -> ListingIn:
    data = {
        "category": "boi",
        "age": 30,
        "price": Decimal("3200.00"),
        "weight": Decimal("510.50"),
        "details": "Vacinado",
        "photo": "/uploads/boi.jpg",
        "sex": "M",
        "breed_id": breed_id,
        "admin_id": admin_id,
    }
    data.update(overrides)
    return ListingIn(**data)


class TestListingService:
    def test_create_and_get(self, session):
        breed = BreedFactory(name="Nelore")
        admin = AdminFactory()
        session.commit()
        service = ListingService()

        created = service.create(_listing_in(breed.id, admin.id))
        fetched = service.get(created.id)

        assert fetched.price == Decimal("3200.00")
        assert fetched.featured is False
        assert fetched.breed.name == "Nelore"

    def test_create_requires_every_field(self, session):
        with pytest.raises(ValidationFailedError, match="Please provide every required"):
            ListingService().create(_listing_in(1, "x", details=" "))

    def test_create_with_unknown_breed(self, session):
        admin = AdminFactory()
        session.commit()

        with pytest.raises(InvalidReferenceError):
            ListingService().create(_listing_in(999, admin.id))
        assert session.execute(select(func.count()).select_from(Listing)).scalar_one() == 0

    def test_update_defaults_photo(self, session):
        listing = ListingFactory(photo="/uploads/old.jpg", sex="M")
        other = BreedFactory(name="Gir")
        session.commit()

        out = ListingService().update(listing.id, ListingUpdateIn(sex="F", breed_id=other.id))

        assert out.sex == "F"
        assert out.breed.name == "Gir"
        assert out.photo == DEFAULT_PHOTO
        assert session.get(Listing, listing.id).photo == DEFAULT_PHOTO

    def test_update_requires_sex_and_breed(self, session):
        listing = ListingFactory()
        session.commit()

        with pytest.raises(ValidationFailedError):
            ListingService().update(listing.id, ListingUpdateIn(sex="F"))

    def test_update_with_unknown_breed(self, session):
        listing = ListingFactory()
        session.commit()

        with pytest.raises(InvalidReferenceError):
            ListingService().update(listing.id, ListingUpdateIn(sex="F", breed_id=999))

    def test_delete_removes_proposals(self, session):
        proposal = ProposalFactory()
        listing_id = proposal.listing_id
        session.commit()

        removed = ListingService().delete(listing_id)

        assert removed.id == listing_id
        assert session.execute(select(func.count()).select_from(Proposal)).scalar_one() == 0
        with pytest.raises(NotFoundError):
            ListingService().get(listing_id)


class TestProposalService:
    def test_submit_and_list_for_customer(self, session):
        customer = CustomerFactory()
        listing = ListingFactory(photo=None)
        session.commit()
        service = ProposalService()

        out = service.submit(
            ProposalIn(customer_id=customer.id, listing_id=listing.id, description=" R$ 3000 ")
        )

        assert out.description == "R$ 3000"
        assert out.answer is None
        [mine] = service.list_for_customer(customer.id)
        assert mine.id == out.id
        assert mine.customer is None
        assert mine.listing.photo == DEFAULT_PHOTO

    def test_submit_requires_fields(self):
        with pytest.raises(ValidationFailedError, match="customer_id, listing_id and description"):
            ProposalService().submit(ProposalIn(customer_id="x", listing_id=1))

    def test_submit_with_unknown_listing(self, session):
        customer = CustomerFactory()
        session.commit()

        with pytest.raises(InvalidReferenceError):
            ProposalService().submit(
                ProposalIn(customer_id=customer.id, listing_id=999, description="offer")
            )

    def test_answer_exposes_customer_contact(self, session, caplog):
        proposal = ProposalFactory(customer=CustomerFactory(name="Ana"))
        session.commit()

        with caplog.at_level("INFO", logger="market.services.proposals.service"):
            out = ProposalService().answer(proposal.id, "Aceito")

        assert out.answer == "Aceito"
        assert out.customer.name == "Ana"
        assert any("contact Ana" in r.getMessage() for r in caplog.records)
        assert ProposalService().list_proposals()[0].answer == "Aceito"

    def test_answer_requires_text(self, session):
        proposal = ProposalFactory()
        session.commit()

        with pytest.raises(ValidationFailedError, match="Please provide the answer"):
            ProposalService().answer(proposal.id, "  ")

    def test_answer_unknown_proposal(self):
        with pytest.raises(NotFoundError):
            ProposalService().answer(999, "Aceito")
