from __future__ import annotations

from typing import Protocol


class PasswordHasher(Protocol):
    """Port for one-way, salted password hashing."""

    def hash(self, password: str) -> str: ...

    def verify(self, password: str, stored_hash: str | None) -> bool: ...
