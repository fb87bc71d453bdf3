"""Account-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields

from .base import InputSchema


class AdminRegisterSchema(InputSchema):
    """Input payload for administrator registration."""

    name = fields.String(load_default=None, allow_none=True)
    email = fields.String(load_default=None, allow_none=True)
    phone = fields.String(load_default=None, allow_none=True)
    password = fields.String(load_default=None, allow_none=True, load_only=True)


class CustomerRegisterSchema(InputSchema):
    """Input payload for customer registration."""

    name = fields.String(load_default=None, allow_none=True)
    national_id = fields.String(load_default=None, allow_none=True)
    phone = fields.String(load_default=None, allow_none=True)
    password = fields.String(load_default=None, allow_none=True, load_only=True)


class AdminLoginSchema(InputSchema):
    email = fields.String(load_default=None, allow_none=True)
    password = fields.String(load_default=None, allow_none=True, load_only=True)


class CustomerLoginSchema(InputSchema):
    national_id = fields.String(load_default=None, allow_none=True)
    password = fields.String(load_default=None, allow_none=True, load_only=True)


class PasswordResetSchema(InputSchema):
    password = fields.String(load_default=None, allow_none=True, load_only=True)


class NationalIdLookupSchema(InputSchema):
    national_id = fields.String(load_default=None, allow_none=True)


class AdminSchema(Schema):
    """Public administrator profile."""

    id = fields.String(required=True)
    name = fields.String(required=True)
    email = fields.String(required=True)
    phone = fields.String(required=True)
    created_at = fields.DateTime(allow_none=True)


class CustomerSchema(Schema):
    """Public customer profile."""

    id = fields.String(required=True)
    name = fields.String(required=True)
    national_id = fields.String(required=True)
    phone = fields.String(required=True)
    created_at = fields.DateTime(allow_none=True)


class AdminLoginResponseSchema(AdminSchema):
    """Administrator profile plus the issued session token."""

    token = fields.String(required=True)


class SessionClaimsSchema(Schema):
    """Claims of the verified bearer token."""

    subject_id = fields.String(data_key="id")
    kind = fields.String()
    name = fields.String()
    phone = fields.String()
    issued_at = fields.DateTime()
    expires_at = fields.DateTime()
