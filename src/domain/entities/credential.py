"""
Credential Entity

Stored identity and password hash for one account.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class CredentialRecord(SQLModel, table=True):
    """
    Credential record - one row per account.

    Business Rules:
    - Username is unique, and unique ignoring case (username_normalized)
    - Password stored as bcrypt hash, never plaintext
    - Provisioned out of band; read-only to authentication
    """

    __tablename__ = "credentials"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=255)
    username_normalized: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    def __repr__(self) -> str:
        # Keep the hash out of reprs that may end up in logs
        return f"CredentialRecord(id={self.id!s}, username={self.username!r})"
