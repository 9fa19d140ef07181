from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.errors import translate_store_errors
from src.adapter.repositories.credential_repository import CredentialRepository
from src.adapter.repositories.session_repository import SessionRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession, username_case_sensitive: bool = True):
        self.session = session
        self.username_case_sensitive = username_case_sensitive

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.credentials = CredentialRepository(
            self.session, case_sensitive=self.username_case_sensitive
        )
        self.sessions = SessionRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    @translate_store_errors
    async def commit(self):
        await self.session.commit()

    @translate_store_errors
    async def rollback(self):
        await self.session.rollback()

    @translate_store_errors
    async def ping(self):
        await self.session.execute(text("SELECT 1"))
