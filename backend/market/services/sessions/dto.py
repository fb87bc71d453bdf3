"""
DTOs for SessionTokenService.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class SessionClaims:
    """
    Verified snapshot of the claims embedded in a session token.

    Claims are captured at issuance; later profile changes are not reflected
    until a new token is issued.

    :param subject_id: Account identifier (``sub``).
    :type subject_id: str
    :param kind: Account kind name, e.g. ``"admin"``.
    :type kind: str
    :param name: Display name at issuance time.
    :type name: str
    :param phone: Canonical phone at issuance time.
    :type phone: str
    :param issued_at: Issuance instant (UTC).
    :type issued_at: datetime
    :param expires_at: Expiry instant (UTC).
    :type expires_at: datetime
    """

    subject_id: str
    kind: str
    name: str
    phone: str
    issued_at: datetime
    expires_at: datetime
