import hashlib
import secrets
from datetime import timedelta
from typing import Optional, Tuple
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.errors import translate_store_errors
from src.app.repositories.session_repository import ISessionRepository
from src.domain.base import utc_now
from src.domain.entities import Session

# 32 random bytes -> 256 bits of entropy per token
SESSION_TOKEN_BYTES = 32


def hash_session_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()


class SessionRepository(ISessionRepository):
    """
    Session repository implementation using SQLModel.

    Raw tokens only exist in memory and in the client's cookie; rows are
    keyed by the SHA-256 of the token, which gives O(1) lookup without
    storing a usable credential.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    @translate_store_errors
    async def create(self, user_id: UUID, ttl: timedelta) -> Tuple[str, Session]:
        """Issue a new session with a fresh random token"""
        token = secrets.token_urlsafe(SESSION_TOKEN_BYTES)
        now = utc_now()
        session_obj = Session(
            token_hash=hash_session_token(token),
            user_id=user_id,
            created_at=now,
            expires_at=now + ttl,
        )
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return token, session_obj

    @translate_store_errors
    async def invalidate(self, session_id: str) -> bool:
        """Revoke the session behind a raw token"""
        stmt = (
            update(Session)
            .where(
                Session.token_hash == hash_session_token(session_id),
                Session.revoked == False,
            )
            .values(revoked=True, revoked_at=utc_now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    @translate_store_errors
    async def get_active(self, session_id: str) -> Optional[Session]:
        """Get the non-revoked, non-expired session behind a raw token"""
        stmt = select(Session).where(
            Session.token_hash == hash_session_token(session_id),
            Session.revoked == False,
            Session.expires_at > utc_now(),
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def revoke_all_by_user_id(self, user_id: UUID) -> int:
        """Revoke all active sessions for a user"""
        stmt = (
            update(Session)
            .where(Session.user_id == user_id, Session.revoked == False)
            .values(revoked=True, revoked_at=utc_now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
