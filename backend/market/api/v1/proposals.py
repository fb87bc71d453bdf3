"""Proposal endpoints."""

from __future__ import annotations

from flask import Blueprint

from market.api.deps import json_body, json_response, proposal_service, require_auth, timing
from market.schemas import ProposalAnswerSchema, ProposalCreateSchema, ProposalSchema
from market.services.proposals.dto import ProposalIn

bp = Blueprint("proposals", __name__)

create_schema = ProposalCreateSchema()
answer_schema = ProposalAnswerSchema()
proposal_schema = ProposalSchema()


@bp.get("")
@timing
def list_proposals():
    """List proposals with the customer contact and the listing."""

    proposals = proposal_service().list_proposals()
    return json_response({"data": proposal_schema.dump(proposals, many=True)})


@bp.post("")
@timing
def submit_proposal():
    data = create_schema.load(json_body())
    proposal = proposal_service().submit(ProposalIn(**data))
    return json_response({"data": proposal_schema.dump(proposal)}, status=201)


@bp.patch("/<int:proposal_id>")
@require_auth
@timing
def answer_proposal(proposal_id: int):
    data = answer_schema.load(json_body())
    proposal = proposal_service().answer(proposal_id, data["answer"])
    return json_response({"data": proposal_schema.dump(proposal)})


@bp.get("/customer/<string:customer_id>")
@timing
def customer_proposals(customer_id: str):
    proposals = proposal_service().list_for_customer(customer_id)
    return json_response({"data": proposal_schema.dump(proposals, many=True)})
