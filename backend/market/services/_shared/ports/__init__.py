"""
market.services._shared.ports
=============================

*Ports* (hexagonal interfaces) that the service layer depends on for
credential hashing and session-token signing.

Modules
-------
- :mod:`token_provider`:
    Defines :class:`~.TokenProvider`, the abstraction for signing and decoding
    session tokens, plus :class:`~.StubTokenProvider` for unit tests.

- :mod:`password_hasher`:
    Defines :class:`~.PasswordHasher`, the salted one-way hashing contract.

Concrete adapters live under ``market.infra``.
"""

from __future__ import annotations

from .password_hasher import PasswordHasher
from .token_provider import StubTokenProvider, TokenDecodeError, TokenProvider

__all__ = [
    "PasswordHasher",
    "StubTokenProvider",
    "TokenDecodeError",
    "TokenProvider",
]
