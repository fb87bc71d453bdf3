"""Listing endpoints: storefront search and administrator maintenance."""

from __future__ import annotations

from flask import Blueprint

from market.api.deps import json_body, json_response, listing_service, require_auth, timing
from market.schemas import ListingCreateSchema, ListingSchema, ListingUpdateSchema
from market.services.listings.dto import ListingIn, ListingUpdateIn

bp = Blueprint("listings", __name__)

create_schema = ListingCreateSchema()
update_schema = ListingUpdateSchema()
listing_schema = ListingSchema()


@bp.get("")
@timing
def list_listings():
    listings = listing_service().list_listings()
    return json_response({"data": listing_schema.dump(listings, many=True)})


@bp.get("/search/<path:term>")
@timing
def search(term: str):
    """Search by price ceiling (numeric term) or category/breed text."""

    listings = listing_service().search(term)
    return json_response({"data": listing_schema.dump(listings, many=True)})


@bp.get("/<int:listing_id>")
@timing
def get_listing(listing_id: int):
    listing = listing_service().get(listing_id)
    return json_response({"data": listing_schema.dump(listing)})


@bp.post("")
@require_auth
@timing
def create_listing():
    data = create_schema.load(json_body())
    listing = listing_service().create(ListingIn(**data))
    return json_response({"data": listing_schema.dump(listing)}, status=201)


@bp.put("/<int:listing_id>")
@require_auth
@timing
def update_listing(listing_id: int):
    data = update_schema.load(json_body())
    listing = listing_service().update(listing_id, ListingUpdateIn(**data))
    return json_response({"data": listing_schema.dump(listing)})


@bp.delete("/<int:listing_id>")
@require_auth
@timing
def delete_listing(listing_id: int):
    listing = listing_service().delete(listing_id)
    return json_response({"data": listing_schema.dump(listing)})
