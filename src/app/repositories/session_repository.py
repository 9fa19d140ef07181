from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Optional, Tuple
from uuid import UUID

from src.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def create(self, user_id: UUID, ttl: timedelta) -> Tuple[str, Session]:
        """Issue a new session. Returns the raw session token and the stored session."""
        pass

    @abstractmethod
    async def invalidate(self, session_id: str) -> bool:
        """Revoke the session behind a raw token. Returns True if an active session was revoked."""
        pass

    @abstractmethod
    async def get_active(self, session_id: str) -> Optional[Session]:
        """Get the non-revoked, non-expired session behind a raw token"""
        pass

    @abstractmethod
    async def revoke_all_by_user_id(self, user_id: UUID) -> int:
        """Revoke all active sessions for a user. Returns count of revoked sessions."""
        pass
