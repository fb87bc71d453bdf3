"""Shared Marshmallow base classes."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema


class InputSchema(Schema):
    """Lenient request schema.

    Unknown keys are dropped and every field defaults to ``None`` so that
    presence rules (and their messages) stay in the service layer. Only type
    mismatches are rejected here.
    """

    class Meta:
        unknown = EXCLUDE
