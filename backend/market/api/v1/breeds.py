"""Breed catalogue endpoints."""

from __future__ import annotations

from flask import Blueprint

from market.api.deps import breed_service, json_body, json_response, require_auth, timing
from market.schemas import BreedInputSchema, BreedSchema

bp = Blueprint("breeds", __name__)

input_schema = BreedInputSchema()
breed_schema = BreedSchema()


@bp.get("")
@timing
def list_breeds():
    return json_response({"data": breed_schema.dump(breed_service().list_breeds(), many=True)})


@bp.post("")
@require_auth
@timing
def create_breed():
    data = input_schema.load(json_body())
    breed = breed_service().create(data["name"])
    return json_response({"data": breed_schema.dump(breed)}, status=201)


@bp.put("/<int:breed_id>")
@require_auth
@timing
def rename_breed(breed_id: int):
    data = input_schema.load(json_body())
    breed = breed_service().rename(breed_id, data["name"])
    return json_response({"data": breed_schema.dump(breed)})


@bp.delete("/<int:breed_id>")
@require_auth
@timing
def delete_breed(breed_id: int):
    breed = breed_service().delete(breed_id)
    return json_response({"data": breed_schema.dump(breed)})
