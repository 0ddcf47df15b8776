"""
bcrypt password hasher.

Implements IPasswordHasher. Hashing runs in a worker thread so the
event loop is not blocked by the key-stretching work.
"""

import asyncio
import logging

import bcrypt

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 12


class BcryptPasswordHasher:
    """Hash and verify passwords with bcrypt."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds

    def hash_sync(self, plain_password: str) -> str:
        password_bytes = plain_password.encode("utf-8")
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password_bytes, salt).decode("utf-8")

    def compare_sync(self, plain_password: str, hashed_password: str) -> bool:
        if not plain_password or not hashed_password:
            return False
        try:
            return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            logger.warning("Password comparison against a malformed hash")
            return False

    async def hash(self, plain_password: str) -> str:
        return await asyncio.to_thread(self.hash_sync, plain_password)

    async def compare(self, plain_password: str, hashed_password: str) -> bool:
        return await asyncio.to_thread(self.compare_sync, plain_password, hashed_password)
