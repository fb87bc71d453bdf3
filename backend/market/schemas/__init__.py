"""Convenience exports for application schemas."""

from __future__ import annotations

from .accounts import (
    AdminLoginResponseSchema,
    AdminLoginSchema,
    AdminRegisterSchema,
    AdminSchema,
    CustomerLoginSchema,
    CustomerRegisterSchema,
    CustomerSchema,
    NationalIdLookupSchema,
    PasswordResetSchema,
    SessionClaimsSchema,
)
from .listing import (
    BreedInputSchema,
    BreedSchema,
    ListingCreateSchema,
    ListingSchema,
    ListingUpdateSchema,
)
from .proposal import ProposalAnswerSchema, ProposalCreateSchema, ProposalSchema

__all__ = [
    "AdminLoginResponseSchema",
    "AdminLoginSchema",
    "AdminRegisterSchema",
    "AdminSchema",
    "CustomerLoginSchema",
    "CustomerRegisterSchema",
    "CustomerSchema",
    "NationalIdLookupSchema",
    "PasswordResetSchema",
    "SessionClaimsSchema",
    "BreedInputSchema",
    "BreedSchema",
    "ListingCreateSchema",
    "ListingSchema",
    "ListingUpdateSchema",
    "ProposalAnswerSchema",
    "ProposalCreateSchema",
    "ProposalSchema",
]
