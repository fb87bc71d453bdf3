from market.services.sessions.dto import SessionClaims
from market.services.sessions.service import SessionTokenService

__all__ = ["SessionClaims", "SessionTokenService"]
