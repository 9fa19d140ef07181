from abc import ABC, abstractmethod
from typing import Union


class IPasswordHasher(ABC):
    """Password hashing interface - application layer"""

    @property
    @abstractmethod
    def dummy_hash(self) -> str:
        """Fixed hash verified against when no credential record exists"""
        pass

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plaintext password for storage"""
        pass

    @abstractmethod
    async def verify(self, password: Union[str, bytes], password_hash: str) -> bool:
        """
        Check a password against a stored hash in constant time.

        Raises:
            ValueError: if password_hash is not a usable hash
        """
        pass
