from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import CredentialRecord


class ICredentialRepository(ABC):
    """Credential repository interface - application layer"""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[CredentialRecord]:
        """Get credential record by username (case policy is store-defined)"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[CredentialRecord]:
        """Get credential record by ID"""
        pass

    @abstractmethod
    async def create(self, username: str, password_hash: str) -> CredentialRecord:
        """Provision a new credential record"""
        pass
