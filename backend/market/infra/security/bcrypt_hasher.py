# market/infra/security/bcrypt_hasher.py
from __future__ import annotations

from dataclasses import dataclass

import bcrypt

from market.services._shared.ports import PasswordHasher

DEFAULT_ROUNDS = 12
MAX_PASSWORD_BYTES = 72  # bcrypt only consumes the first 72 bytes


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


@dataclass(frozen=True, slots=True)
class BcryptPasswordHasher(PasswordHasher):
    """
    Adapter hashing passwords with bcrypt.

    The salt and cost are embedded in the returned ``$2b$<cost>$...`` string,
    so :meth:`verify` needs nothing but the stored value.

    :param rounds: bcrypt cost factor (log2 of the iteration count).
    :type rounds: int
    """

    rounds: int = DEFAULT_ROUNDS

    def __post_init__(self) -> None:
        if not 4 <= self.rounds <= 31:
            raise ValueError(f"bcrypt rounds must be within 4..31, got {self.rounds}")

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("ascii")

    def verify(self, password: str, stored_hash: str | None) -> bool:
        """
        Check ``password`` against ``stored_hash`` in constant time.

        A missing or malformed stored hash counts as a mismatch.
        """
        if not stored_hash:
            return False
        try:
            return bcrypt.checkpw(_encode(password), stored_hash.encode("utf-8"))
        except (ValueError, TypeError):
            return False
