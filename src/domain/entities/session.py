"""
Session Entity

Server-held proof that a client has authenticated.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class Session(SQLModel, table=True):
    """
    Session entity - referenced by an opaque token held by the client.

    Business Rules:
    - Only the SHA-256 digest of the token is stored
    - A fresh token is issued on every successful login
    - Revoked or expired sessions never authenticate
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    token_hash: str = Field(unique=True, index=True, max_length=64)  # SHA-256 hex
    user_id: UUID = Field(foreign_key="credentials.id", nullable=False, index=True)

    revoked: bool = Field(default=False)
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_session_expires_at", "expires_at"),
        Index("idx_session_user_revoked", "user_id", "revoked"),
    )
