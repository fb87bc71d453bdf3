"""Proposal Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields

from .base import InputSchema
from .listing import ListingSchema


class ProposalCreateSchema(InputSchema):
    customer_id = fields.String(load_default=None, allow_none=True)
    listing_id = fields.Integer(load_default=None, allow_none=True)
    description = fields.String(load_default=None, allow_none=True)


class ProposalAnswerSchema(InputSchema):
    answer = fields.String(load_default=None, allow_none=True)


class CustomerContactSchema(Schema):
    id = fields.String()
    name = fields.String()
    national_id = fields.String()
    phone = fields.String()


class ProposalSchema(Schema):
    """Public proposal representation with optional related data."""

    id = fields.Integer(required=True)
    customer_id = fields.String(required=True)
    listing_id = fields.Integer(required=True)
    description = fields.String(required=True)
    answer = fields.String(allow_none=True)
    created_at = fields.DateTime(allow_none=True)
    customer = fields.Nested(CustomerContactSchema, allow_none=True)
    listing = fields.Nested(ListingSchema, allow_none=True)
