"""Listing and breed Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields

from .base import InputSchema


class BreedInputSchema(InputSchema):
    name = fields.String(load_default=None, allow_none=True)


class BreedSchema(Schema):
    id = fields.Integer(required=True)
    name = fields.String(required=True)


class ListingCreateSchema(InputSchema):
    """Input payload for publishing a listing."""

    category = fields.String(load_default=None, allow_none=True)
    age = fields.Integer(load_default=None, allow_none=True)
    price = fields.Decimal(load_default=None, allow_none=True)
    weight = fields.Decimal(load_default=None, allow_none=True)
    details = fields.String(load_default=None, allow_none=True)
    photo = fields.String(load_default=None, allow_none=True)
    sex = fields.String(load_default=None, allow_none=True)
    breed_id = fields.Integer(load_default=None, allow_none=True)
    admin_id = fields.String(load_default=None, allow_none=True)
    featured = fields.Boolean(load_default=False)


class ListingUpdateSchema(InputSchema):
    """Input payload for updating sex, breed and photo of a listing."""

    sex = fields.String(load_default=None, allow_none=True)
    breed_id = fields.Integer(load_default=None, allow_none=True)
    photo = fields.String(load_default=None, allow_none=True)


class ListingSchema(Schema):
    """Public listing representation."""

    id = fields.Integer(required=True)
    category = fields.String(required=True)
    age = fields.Integer(required=True)
    price = fields.Decimal(as_string=True, places=2)
    weight = fields.Decimal(as_string=True, places=2)
    details = fields.String()
    featured = fields.Boolean()
    photo = fields.String()
    sex = fields.String()
    breed_id = fields.Integer()
    admin_id = fields.String()
    breed = fields.Nested(BreedSchema, allow_none=True)
    created_at = fields.DateTime(allow_none=True)
