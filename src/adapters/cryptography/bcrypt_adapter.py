"""
bcrypt adapter - Implements Encrypter protocol.

This module provides the bcrypt implementation of the domain's
encryption port.

bcrypt only reads the first 72 bytes of a secret, and bcrypt >= 5
raises ValueError instead of ignoring the rest. Values are truncated
to 72 UTF-8 bytes before hashing, so long passwords are accepted and
verify against their first 72 bytes.
"""

import bcrypt

# bcrypt's input limit, in bytes
MAX_SECRET_BYTES = 72


class BcryptAdapter:
    """
    Implements Encrypter protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, cost: int) -> None:
        """
        Initialize adapter with the bcrypt work factor.

        Args:
            cost: bcrypt log rounds used when generating each salt
        """
        self._cost = cost

    def encrypt(self, value: str) -> str:
        """Hash the first 72 bytes of value with a fresh salt. bcrypt errors propagate."""
        secret = value.encode()[:MAX_SECRET_BYTES]
        return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self._cost)).decode()
