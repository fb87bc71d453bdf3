"""
SessionTokenService
===================

Issues and verifies signed, time-limited session tokens. There is no
revocation: expiry is the only way a token stops being valid.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from market.services._shared.errors import InvalidSessionError
from market.services._shared.ports import TokenDecodeError, TokenProvider
from market.services.sessions.dto import SessionClaims

log = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=1)
REQUIRED_CLAIMS = ("sub", "kind", "name", "phone", "iat", "exp")


class SessionTokenService:
    """
    Wrap a :class:`TokenProvider` with the session claim layout.

    :param provider: Signing/decoding adapter.
    :type provider: TokenProvider
    :param ttl: Token lifetime (one hour by default).
    :type ttl: timedelta
    """

    def __init__(self, provider: TokenProvider, *, ttl: timedelta = DEFAULT_TTL) -> None:
        if ttl <= timedelta(0):
            raise ValueError("Session token lifetime must be positive.")
        self.provider = provider
        self.ttl = ttl

    def issue(self, kind: str, subject_id: str, name: str, phone: str) -> str:
        """
        Sign a token carrying ``{sub, kind, name, phone, iat, exp}``.

        :returns: Encoded token string.
        :rtype: str
        """
        return self.provider.create_access_token(
            identity=str(subject_id),
            additional_claims={"kind": kind, "name": name, "phone": phone},
            expires_delta=self.ttl,
        )

    def verify(self, token: str | None) -> SessionClaims:
        """
        Decode and validate a token, failing closed.

        :param token: Encoded token (``None``/blank counts as missing).
        :type token: str | None
        :returns: Verified claims.
        :rtype: SessionClaims
        :raises InvalidSessionError: When the token is missing, malformed,
            forged, expired, or lacks session claims.
        """
        if not token or not token.strip():
            raise InvalidSessionError("Missing session token")
        try:
            payload: dict[str, Any] = self.provider.decode(token.strip())
        except TokenDecodeError as exc:
            log.info("session.verify.rejected", extra={"reason": str(exc)})
            raise InvalidSessionError() from exc

        if any(payload.get(claim) in (None, "") for claim in REQUIRED_CLAIMS):
            raise InvalidSessionError()

        return SessionClaims(
            subject_id=str(payload["sub"]),
            kind=str(payload["kind"]),
            name=str(payload["name"]),
            phone=str(payload["phone"]),
            issued_at=datetime.fromtimestamp(int(payload["iat"]), tz=UTC),
            expires_at=datetime.fromtimestamp(int(payload["exp"]), tz=UTC),
        )
