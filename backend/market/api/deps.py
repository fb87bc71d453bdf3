"""Shared API helpers: service wiring, authentication and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any, TypeVar, cast

from flask import Response, current_app, g, jsonify, request

from market.infra.jwt.flask_jwt_token_provider import JWTTokenProvider
from market.infra.security.bcrypt_hasher import BcryptPasswordHasher
from market.services._shared.errors import InvalidSessionError
from market.services.accounts import AccountService
from market.services.breeds import BreedService
from market.services.listings import ListingService
from market.services.proposals import ProposalService
from market.services.sessions import SessionClaims, SessionTokenService

F = TypeVar("F", bound=Callable[..., Any])

BEARER_PREFIX = "bearer "


# ------------------------------ Service wiring ------------------------------


def get_password_hasher() -> BcryptPasswordHasher:
    """Return the process-wide hasher configured from ``BCRYPT_LOG_ROUNDS``."""

    hasher = current_app.extensions.get("password_hasher")
    if hasher is None:
        hasher = BcryptPasswordHasher(rounds=int(current_app.config["BCRYPT_LOG_ROUNDS"]))
        current_app.extensions["password_hasher"] = hasher
    return cast(BcryptPasswordHasher, hasher)


def get_session_tokens() -> SessionTokenService:
    """Build the session token service bound to Flask-JWT-Extended."""

    ttl = timedelta(seconds=int(current_app.config["SESSION_TOKEN_TTL_SECONDS"]))
    return SessionTokenService(JWTTokenProvider(), ttl=ttl)


def account_service() -> AccountService:
    return AccountService(
        hasher=get_password_hasher(),
        tokens=get_session_tokens(),
        country_code=current_app.config["PHONE_COUNTRY_CODE"],
    )


def listing_service() -> ListingService:
    return ListingService(default_photo=current_app.config["DEFAULT_LISTING_PHOTO"])


def breed_service() -> BreedService:
    return BreedService()


def proposal_service() -> ProposalService:
    return ProposalService(default_photo=current_app.config["DEFAULT_LISTING_PHOTO"])


# ------------------------------ Authentication ------------------------------


def _bearer_token() -> str | None:
    header = request.headers.get("Authorization", "")
    if not header.lower().startswith(BEARER_PREFIX):
        return None
    return header[len(BEARER_PREFIX) :].strip() or None


def current_claims() -> SessionClaims:
    """Return the claims verified by :func:`require_auth` for this request."""

    return cast(SessionClaims, g.session_claims)


def require_auth(func: F) -> F:
    """Ensure the request carries a valid, unexpired session token.

    The verified claims are exposed through :func:`current_claims`; failures
    raise :class:`InvalidSessionError` (rendered as 401).
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        token = _bearer_token()
        if token is None:
            raise InvalidSessionError("Missing session token")
        g.session_claims = get_session_tokens().verify(token)
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


# ------------------------------ Responses ------------------------------------


def json_body() -> dict[str, Any]:
    """Return the JSON object sent with the request (empty when absent)."""

    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
