"""bcrypt-backed password hashing."""

import bcrypt

from ...domain.errors import HashingError
from ...domain.ports.persistence import PasswordHasher

# bcrypt only considers the first 72 bytes of a password
_BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(PasswordHasher):
    """Hashes and verifies passwords with a per-digest random salt."""

    def __init__(self, rounds: int = 10) -> None:
        if not 4 <= rounds <= 31:
            raise ValueError("bcrypt rounds must be between 4 and 31")
        self.rounds = rounds

    def hash(self, password: str) -> str:
        try:
            digest = bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self.rounds))
        except (TypeError, ValueError) as exc:
            raise HashingError() from exc
        return digest.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a plaintext password against a stored digest.

        Returns:
            False for a non-matching password

        Raises:
            HashingError: If ``password_hash`` is not a bcrypt digest
        """
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except (TypeError, ValueError) as exc:
            raise HashingError("Error comparing passwords") from exc
