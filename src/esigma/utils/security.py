"""
Password hashing and opaque token generation
"""

import logging
import uuid

from passlib.hash import bcrypt

logger = logging.getLogger(__name__)


class PasswordHasher:
    """One-way bcrypt hash and compare with a configurable cost factor"""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        self._bcrypt = bcrypt.using(rounds=rounds)

    def hash(self, password: str) -> str:
        return self._bcrypt.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Compare a plain password against a stored hash; malformed hashes never match"""
        if not password_hash:
            return False
        try:
            return self._bcrypt.verify(password, password_hash)
        except (ValueError, TypeError) as e:
            logger.warning(f"Password hash could not be verified: {e}")
            return False


def generate_token() -> str:
    """Random opaque identifier for session tokens and synthesized ids"""
    return str(uuid.uuid4())
