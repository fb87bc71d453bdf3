"""
Account kinds.

Administrators and customers share one registration/authentication flow; the
differences (identity field, repository, messages, whether a session token is
issued) are captured by an :class:`AccountKind` value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class AccountKind:
    """
    Parameters of one account kind.

    :param name: Stable kind name used in token claims and logs.
    :param entity: Entity name used in error messages.
    :param identity_field: Model attribute holding the login identity.
    :param identity_label: Human-readable identity name.
    :param repository: Attribute name of the repository on the unit of work.
    :param unique_constraint: Database constraint guarding the identity.
    :param unique_column: ``table.column`` reported by dialects without
        constraint names in their error messages.
    :param missing_fields_message: Registration failure for blank input.
    :param login_failure_message: The single message for every login failure.
    :param conflict_message: Registration failure for a taken identity.
    :param issues_token: Whether a successful login returns a session token.
    """

    name: str
    entity: str
    identity_field: str
    identity_label: str
    repository: str
    unique_constraint: str
    unique_column: str
    missing_fields_message: str
    login_failure_message: str
    conflict_message: str
    issues_token: bool

    def repository_of(self, uow: Any) -> Any:
        return getattr(uow, self.repository)

    def __str__(self) -> str:
        return self.name


ADMIN = AccountKind(
    name="admin",
    entity="Admin",
    identity_field="email",
    identity_label="email",
    repository="admins",
    unique_constraint="uq_admins_email",
    unique_column="admins.email",
    missing_fields_message="Please provide name, email, phone and password.",
    login_failure_message="Incorrect email or password.",
    conflict_message="Email already registered.",
    issues_token=True,
)

CUSTOMER = AccountKind(
    name="customer",
    entity="Customer",
    identity_field="national_id",
    identity_label="national id",
    repository="customers",
    unique_constraint="uq_customers_national_id",
    unique_column="customers.national_id",
    missing_fields_message="Please provide name, national id, phone and password.",
    login_failure_message="Incorrect national id or password.",
    conflict_message="National id already registered.",
    issues_token=False,
)
