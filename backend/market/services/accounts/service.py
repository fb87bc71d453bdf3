"""
AccountService
==============

Registration, authentication and password reset for both account kinds:
- Credential policy and phone canonicalization before persistence
- Atomic insert-or-conflict on the identity (no lookup before insert)
- A single generic failure for every login failure mode
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from sqlalchemy.exc import IntegrityError

from market.services._shared.base import BaseService
from market.services._shared.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    PolicyViolationError,
    ValidationFailedError,
    violates,
)
from market.services._shared.policies.credentials import (
    DEFAULT_COUNTRY_CODE,
    canonicalize_phone,
    validate_password,
    validate_phone,
)
from market.services._shared.ports import PasswordHasher
from market.services.accounts.dto import (
    AccountOut,
    LoginIn,
    LoginOut,
    PasswordResetIn,
    RegistrationIn,
)
from market.services.accounts.kinds import AccountKind
from market.services.sessions.service import SessionTokenService

log = logging.getLogger(__name__)

MISSING_PASSWORD_MESSAGE = "Please provide the new password."


@lru_cache(maxsize=8)
def _timing_decoy(hasher: PasswordHasher) -> str:
    # Verified against when the identity is unknown, so both paths pay one bcrypt check.
    return hasher.hash("timing-decoy-password")


def _present(value: str | None) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _supplied(password: str | None) -> bool:
    # Whitespace is a password like any other; the policy judges it.
    return isinstance(password, str) and password != ""


def to_account_out(kind: AccountKind, account: Any) -> AccountOut:
    """Build the public profile of an ORM account row."""
    return AccountOut(
        id=str(account.id),
        kind=kind.name,
        name=account.name,
        phone=account.phone,
        email=getattr(account, "email", None),
        national_id=getattr(account, "national_id", None),
        created_at=account.created_at,
    )


class AccountService(BaseService):
    """
    Application service shared by administrators and customers.

    :param hasher: Password hashing adapter.
    :type hasher: PasswordHasher
    :param tokens: Session token service; needed to log in kinds that
        issue tokens.
    :type tokens: SessionTokenService | None
    :param country_code: Calling code used for canonical phones.
    :type country_code: str
    """

    def __init__(
        self,
        *,
        hasher: PasswordHasher,
        tokens: SessionTokenService | None = None,
        country_code: str = DEFAULT_COUNTRY_CODE,
    ) -> None:
        self.hasher = hasher
        self.tokens = tokens
        self.country_code = country_code

    # --------------------------------------------------------------------- #
    # Registration
    # --------------------------------------------------------------------- #

    def register(self, kind: AccountKind, dto: RegistrationIn) -> AccountOut:
        """
        Register a new account of ``kind``.

        :param kind: Account kind.
        :type kind: AccountKind
        :param dto: Registration input.
        :type dto: RegistrationIn
        :returns: Public-safe profile.
        :rtype: AccountOut
        :raises ValidationFailedError: When a field is missing or blank.
        :raises PolicyViolationError: When the password or phone breaks a rule.
        :raises ConflictError: When the identity is already registered.
        """
        fields_present = all(_present(v) for v in (dto.name, dto.identity, dto.phone))
        if not fields_present or not _supplied(dto.password):
            raise ValidationFailedError(kind.missing_fields_message)

        password_violations = validate_password(dto.password)
        if password_violations:
            raise PolicyViolationError(password_violations)

        phone_violations = validate_phone(dto.phone)
        if phone_violations:
            raise PolicyViolationError(phone_violations)

        identity = dto.identity.strip()
        phone = canonicalize_phone(dto.phone, self.country_code)
        password_hash = self.hasher.hash(dto.password)

        with self.rw_uow() as uow:
            repo = kind.repository_of(uow)
            try:
                account = repo.model(
                    name=dto.name,
                    phone=phone,
                    password_hash=password_hash,
                    **{kind.identity_field: identity},
                )
            except ValueError as exc:
                raise ValidationFailedError(str(exc)) from exc

            try:
                repo.add(account)
            except IntegrityError as exc:
                if violates(exc, kind.unique_constraint, column=kind.unique_column):
                    log.info(
                        "account.register.conflict",
                        extra={"account_kind": kind.name, "identity": identity},
                    )
                    raise ConflictError(
                        kind.entity, kind.conflict_message, field=kind.identity_field
                    ) from exc
                raise

            out = to_account_out(kind, account)

        log.info("account.registered", extra={"account_kind": kind.name, "identity": identity})
        return out

    # --------------------------------------------------------------------- #
    # Authentication
    # --------------------------------------------------------------------- #

    def login(self, kind: AccountKind, dto: LoginIn) -> LoginOut:
        """
        Authenticate an account by identity and password.

        Every failure (missing field, unknown identity, wrong password)
        raises the same :class:`AuthenticationError`.

        :param kind: Account kind.
        :type kind: AccountKind
        :param dto: Credentials.
        :type dto: LoginIn
        :returns: Profile, plus a session token for kinds that issue one.
        :rtype: LoginOut
        :raises AuthenticationError: On any failure.
        """
        if not _present(dto.identity) or not dto.password:
            log.info("account.login.failed", extra={"account_kind": kind.name})
            raise AuthenticationError(kind.login_failure_message)

        identity = dto.identity.strip()
        with self.ro_uow() as uow:
            account = kind.repository_of(uow).get_by_identity(identity)
            stored_hash = (
                account.password_hash if account is not None else _timing_decoy(self.hasher)
            )
            verified = self.hasher.verify(dto.password, stored_hash)
            if account is None or not verified:
                log.info(
                    "account.login.failed",
                    extra={"account_kind": kind.name, "identity": identity},
                )
                raise AuthenticationError(kind.login_failure_message)
            out = to_account_out(kind, account)

        token = None
        if kind.issues_token:
            if self.tokens is None:
                raise RuntimeError(
                    f"Logging in {kind.name} accounts requires a SessionTokenService."
                )
            token = self.tokens.issue(kind.name, out.id, out.name, out.phone)

        log.info("account.login.succeeded", extra={"account_kind": kind.name, "identity": identity})
        return LoginOut(account=out, token=token)

    # --------------------------------------------------------------------- #
    # Password reset
    # --------------------------------------------------------------------- #

    def reset_password(self, kind: AccountKind, dto: PasswordResetIn) -> AccountOut:
        """
        Overwrite the password of the account identified by ``dto.identity``.

        :param kind: Account kind.
        :type kind: AccountKind
        :param dto: Identity and new password.
        :type dto: PasswordResetIn
        :returns: Updated public profile.
        :rtype: AccountOut
        :raises ValidationFailedError: When the new password is missing or empty.
        :raises PolicyViolationError: When the new password breaks a rule.
        :raises NotFoundError: When no account has that identity.
        """
        if not _supplied(dto.password):
            raise ValidationFailedError(MISSING_PASSWORD_MESSAGE)

        violations = validate_password(dto.password)
        if violations:
            raise PolicyViolationError(violations)

        identity = dto.identity.strip()
        password_hash = self.hasher.hash(dto.password)

        with self.rw_uow() as uow:
            repo = kind.repository_of(uow)
            account = repo.get_by_identity(identity)
            if account is None:
                raise NotFoundError(kind.entity, identity)
            repo.update_password_hash(account, password_hash)
            out = to_account_out(kind, account)

        log.info("account.password_reset", extra={"account_kind": kind.name, "identity": identity})
        return out

    # --------------------------------------------------------------------- #
    # Retrieval
    # --------------------------------------------------------------------- #

    def identity_exists(self, kind: AccountKind, identity: str | None) -> bool:
        """
        Tell whether an account with ``identity`` exists.

        :raises ValidationFailedError: When ``identity`` is missing or blank.
        """
        if not _present(identity):
            raise ValidationFailedError(f"Please provide the {kind.identity_label}.")
        with self.ro_uow() as uow:
            return kind.repository_of(uow).get_by_identity(identity.strip()) is not None

    def get(self, kind: AccountKind, account_id: str) -> AccountOut:
        """
        Retrieve one account by identifier.

        :raises NotFoundError: If the account does not exist.
        """
        with self.ro_uow() as uow:
            account = kind.repository_of(uow).get(account_id)
            if account is None:
                raise NotFoundError(kind.entity, account_id)
            return to_account_out(kind, account)

    def list_accounts(self, kind: AccountKind) -> list[AccountOut]:
        with self.ro_uow() as uow:
            rows = kind.repository_of(uow).list(sort=["name"])
            return [to_account_out(kind, row) for row in rows]
