"""
Adapter: PBKDF2 password hashing.

Implements PasswordHasher port with PBKDF2-HMAC-SHA256 and a random
salt. Encoded form: ``pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>``.
"""

import hashlib
import hmac
import os

from accounts.domain.users.ports import PasswordHasher

ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16


class Pbkdf2PasswordHasher(PasswordHasher):
    """PBKDF2-HMAC-SHA256 hasher.

    The iteration count is stored inside each hash, so raising it
    later does not invalidate existing passwords.
    """

    def __init__(self, iterations: int) -> None:
        self._iterations = iterations

    def hash(self, password: str) -> str:
        salt = os.urandom(SALT_BYTES)
        dk = self._derive(password, salt, self._iterations)
        return f"{ALGORITHM}${self._iterations}${salt.hex()}${dk.hex()}"

    def verify(self, password: str, encoded: str) -> bool:
        """Return True if ``password`` matches; False for any malformed hash."""
        parts = encoded.split("$")
        if len(parts) != 4 or parts[0] != ALGORITHM:
            return False
        try:
            iterations = int(parts[1])
            salt = bytes.fromhex(parts[2])
            expected = bytes.fromhex(parts[3])
        except ValueError:
            return False
        return hmac.compare_digest(self._derive(password, salt, iterations), expected)

    @staticmethod
    def _derive(password: str, salt: bytes, iterations: int) -> bytes:
        return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
