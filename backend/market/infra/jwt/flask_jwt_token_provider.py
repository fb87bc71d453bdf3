# market/infra/jwt/flask_jwt_token_provider.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any, cast

from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import InvalidTokenError

from market.services._shared.ports import TokenDecodeError, TokenProvider


@dataclass(slots=True)
class JWTTokenProvider(TokenProvider):
    """
    Adapter for Flask-JWT-Extended.

    Signing uses ``JWT_SECRET_KEY`` / ``JWT_ALGORITHM`` from the app config.

    .. note::
       Requires an active Flask app context.
    """

    def create_access_token(
        self,
        *,
        identity: str,
        additional_claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        from flask_jwt_extended import create_access_token as _create_access

        return cast(
            str,
            _create_access(
                identity=identity,
                additional_claims=additional_claims or {},
                expires_delta=expires_delta,
            ),
        )

    def decode(self, token: str) -> dict[str, Any]:
        from flask_jwt_extended import decode_token

        try:
            return cast(dict[str, Any], decode_token(token))
        except (InvalidTokenError, JWTExtendedException) as exc:
            # Expired, bad signature, malformed segments, missing claims...
            raise TokenDecodeError(str(exc)) from exc
