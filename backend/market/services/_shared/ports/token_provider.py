from __future__ import annotations

import hashlib
import hmac
import json
from base64 import urlsafe_b64decode, urlsafe_b64encode
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol


class TokenDecodeError(Exception):
    """Raised by providers when a token is malformed, forged, or expired."""


class TokenProvider(Protocol):
    """Port for issuing and decoding signed session tokens."""

    def create_access_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str: ...

    def decode(self, token: str) -> dict[str, Any]: ...


class StubTokenProvider(TokenProvider):
    """
    Deterministic token provider used in unit tests.

    Tokens are ``<payload>.<signature>`` where the signature is an HMAC over
    the payload, so tampering and expiry behave like the real adapter without
    requiring an application context. ``now`` can be overridden to simulate
    the passage of time.
    """

    def __init__(self, secret: str = "stub-secret", now: datetime | None = None) -> None:
        self._secret = secret.encode("utf-8")
        self.now = now or datetime.now(tz=UTC)

    def _sign(self, body: bytes) -> str:
        digest = hmac.new(self._secret, body, hashlib.sha256).digest()
        return urlsafe_b64encode(digest).decode("ascii")

    def create_access_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        issued_at = int(self.now.timestamp())
        payload: dict[str, Any] = {
            "sub": identity,
            "type": "access",
            "iat": issued_at,
            "exp": issued_at + int((expires_delta or timedelta(minutes=15)).total_seconds()),
        }
        if additional_claims:
            payload.update(additional_claims)
        body = urlsafe_b64encode(json.dumps(payload, sort_keys=True).encode("utf-8"))
        return f"{body.decode('ascii')}.{self._sign(body)}"

    def decode(self, token: str) -> dict[str, Any]:
        try:
            body, signature = token.split(".", 1)
            payload = json.loads(urlsafe_b64decode(body.encode("ascii")))
        except (ValueError, UnicodeEncodeError) as exc:
            raise TokenDecodeError("Malformed token") from exc
        if not hmac.compare_digest(signature, self._sign(body.encode("ascii"))):
            raise TokenDecodeError("Signature verification failed")
        if int(payload["exp"]) <= int(self.now.timestamp()):
            raise TokenDecodeError("Token has expired")
        return dict(payload)
