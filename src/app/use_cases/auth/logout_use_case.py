"""
Logout Use Case

Invalidates the session behind a presented token.
"""

import logging

from src.app.errors import StoreError, StoreUnavailableError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, Result, Return
from .dtos import LogoutResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Use case for ending a session.

    Business Rules:
    - Idempotent: unknown or already revoked tokens still log out
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: str) -> Result[LogoutResponse]:
        try:
            async with self.uow:
                revoked = await self.uow.sessions.invalidate(session_id)
                await self.uow.commit()
        except StoreUnavailableError as exc:
            logger.error(f"Logout aborted, store unavailable: {exc}")
            return Return.err(
                Error("STORE_UNAVAILABLE", "Authentication is temporarily unavailable")
            )
        except StoreError as exc:
            logger.exception(f"Logout aborted, store error: {exc}")
            return Return.err(Error("INTERNAL_ERROR", "Logout failed unexpectedly"))

        if revoked:
            logger.info("Session revoked on logout")

        return Return.ok(LogoutResponse(status="success", message="Logged out"))
