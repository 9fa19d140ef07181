import asyncio
import hmac
import secrets
from typing import Union

import bcrypt

from src.app.services.password_hasher import IPasswordHasher

# bcrypt only consumes this many bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(password: Union[str, bytes]) -> bytes:
    if isinstance(password, str):
        password = password.encode("utf-8")
    return password[:BCRYPT_MAX_PASSWORD_BYTES]


class BcryptPasswordHasher(IPasswordHasher):
    """
    bcrypt implementation of the password hasher.

    Verification recomputes the hash with the stored salt and compares the
    two hash outputs with hmac.compare_digest. The bcrypt work runs in a
    worker thread so concurrent logins do not block the event loop.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        # Same cost as real hashes, so a miss costs what a hit costs
        self._dummy_hash = self.hash(secrets.token_urlsafe(16))

    @property
    def dummy_hash(self) -> str:
        return self._dummy_hash

    def hash(self, password: str) -> str:
        hashed = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(self.rounds))
        return hashed.decode()

    async def verify(self, password: Union[str, bytes], password_hash: str) -> bool:
        return await asyncio.to_thread(self._verify, password, password_hash)

    def _verify(self, password: Union[str, bytes], password_hash: str) -> bool:
        # UnicodeEncodeError is a ValueError: a non-ASCII hash is malformed
        expected = password_hash.encode("ascii")

        try:
            candidate = _password_bytes(password)
        except UnicodeEncodeError:
            # Not valid UTF-8, can never match; still spend the hash work
            bcrypt.hashpw(b"", expected)
            return False

        return hmac.compare_digest(bcrypt.hashpw(candidate, expected), expected)
