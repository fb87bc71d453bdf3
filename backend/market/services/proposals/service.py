"""
ProposalService
===============

Customers submit purchase proposals on listings; administrators answer
them. Answering only records the reply and logs who should be contacted;
no message is delivered.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError

from market.services._shared.base import BaseService
from market.services._shared.errors import (
    InvalidReferenceError,
    NotFoundError,
    ValidationFailedError,
    is_foreign_key_violation,
)
from market.services.listings.service import DEFAULT_PHOTO, to_listing_out
from market.services.proposals.dto import CustomerContactOut, ProposalIn, ProposalOut

log = logging.getLogger(__name__)

MISSING_PROPOSAL_FIELDS_MESSAGE = "Please provide customer_id, listing_id and description."
MISSING_ANSWER_MESSAGE = "Please provide the answer to this proposal."


class ProposalService(BaseService):
    """
    Application service for proposals.

    :param default_photo: Placeholder applied to embedded listings.
    :type default_photo: str
    """

    def __init__(self, *, default_photo: str = DEFAULT_PHOTO) -> None:
        self.default_photo = default_photo

    def _to_out(self, row: Any, *, with_customer: bool = True) -> ProposalOut:
        customer = row.customer if with_customer else None
        return ProposalOut(
            id=row.id,
            customer_id=row.customer_id,
            listing_id=row.listing_id,
            description=row.description,
            answer=row.answer,
            created_at=row.created_at,
            customer=(
                CustomerContactOut(
                    id=customer.id,
                    name=customer.name,
                    national_id=customer.national_id,
                    phone=customer.phone,
                )
                if customer is not None
                else None
            ),
            listing=to_listing_out(row.listing, self.default_photo),
        )

    def list_proposals(self) -> list[ProposalOut]:
        with self.ro_uow() as uow:
            return [self._to_out(row) for row in uow.proposals.list()]

    def list_for_customer(self, customer_id: str) -> list[ProposalOut]:
        with self.ro_uow() as uow:
            rows = uow.proposals.list_for_customer(customer_id)
            return [self._to_out(row, with_customer=False) for row in rows]

    def submit(self, dto: ProposalIn) -> ProposalOut:
        """
        Record a customer's proposal on a listing.

        :raises ValidationFailedError: When a field is missing.
        :raises InvalidReferenceError: When customer or listing do not exist.
        """
        if (
            not dto.customer_id
            or dto.listing_id is None
            or not (dto.description and dto.description.strip())
        ):
            raise ValidationFailedError(MISSING_PROPOSAL_FIELDS_MESSAGE)

        with self.rw_uow() as uow:
            row = uow.proposals.model(
                customer_id=dto.customer_id,
                listing_id=dto.listing_id,
                description=dto.description.strip(),
            )
            try:
                uow.proposals.add(row)
            except IntegrityError as exc:
                if is_foreign_key_violation(exc):
                    raise InvalidReferenceError(("customer_id", "listing_id")) from exc
                raise
            out = self._to_out(row, with_customer=False)

        log.info("proposal.submitted", extra={"proposal_id": out.id, "listing_id": out.listing_id})
        return out

    def answer(self, proposal_id: int, answer: str | None) -> ProposalOut:
        """
        Store an administrator's answer.

        :raises ValidationFailedError: When ``answer`` is missing.
        :raises NotFoundError: If the proposal does not exist.
        """
        if answer is None or not answer.strip():
            raise ValidationFailedError(MISSING_ANSWER_MESSAGE)

        with self.rw_uow() as uow:
            row = uow.proposals.get(proposal_id)
            if row is None:
                raise NotFoundError("Proposal", proposal_id)
            uow.proposals.update(row, answer=answer.strip())
            out = self._to_out(row)

        if out.customer is not None:
            log.info(
                "proposal.answered; contact %s at %s",
                out.customer.name,
                out.customer.phone,
                extra={"proposal_id": proposal_id},
            )
        return out
