from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.errors import translate_store_errors
from src.app.repositories.credential_repository import ICredentialRepository
from src.domain.base import normalize_username
from src.domain.entities import CredentialRecord


class CredentialRepository(ICredentialRepository):
    """
    Credential repository implementation using SQLModel.

    Username matching is case-sensitive unless constructed with
    case_sensitive=False, in which case lookups go through the casefolded
    username_normalized column.
    """

    def __init__(self, session: AsyncSession, case_sensitive: bool = True):
        self.session = session
        self.case_sensitive = case_sensitive

    @translate_store_errors
    async def find_by_username(self, username: str) -> Optional[CredentialRecord]:
        """Get credential record by username"""
        if self.case_sensitive:
            stmt = select(CredentialRecord).where(CredentialRecord.username == username)
        else:
            stmt = select(CredentialRecord).where(
                CredentialRecord.username_normalized == normalize_username(username)
            )
        result = await self.session.exec(stmt)
        record = result.one_or_none()

        # Some backends (MySQL *_ci collations) compare case-insensitively
        if record is not None and self.case_sensitive and record.username != username:
            return None
        return record

    @translate_store_errors
    async def get_by_id(self, user_id: UUID) -> Optional[CredentialRecord]:
        """Get credential record by ID"""
        stmt = select(CredentialRecord).where(CredentialRecord.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    @translate_store_errors
    async def create(self, username: str, password_hash: str) -> CredentialRecord:
        """Provision a new credential record"""
        record = CredentialRecord(
            username=username,
            username_normalized=normalize_username(username),
            password_hash=password_hash,
        )
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return record
