"""
Load Session Use Case

Resolves a presented session token to the authenticated user.
"""

import logging

from src.app.errors import StoreError, StoreUnavailableError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, Result, Return
from .dtos import SessionInfo

logger = logging.getLogger(__name__)


class LoadSessionUseCase:
    """
    Use case for looking up the current session.

    Business Rules:
    - Unknown, revoked and expired tokens are rejected alike
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, session_id: str) -> Result[SessionInfo]:
        invalid = Error("INVALID_SESSION", "Session is invalid or has expired")

        if not session_id:
            return Return.err(invalid)

        try:
            async with self.uow:
                session = await self.uow.sessions.get_active(session_id)
                if session is None:
                    return Return.err(invalid)

                record = await self.uow.credentials.get_by_id(session.user_id)
                if record is None:
                    logger.error(f"Session {session.id} references a missing credential")
                    return Return.err(invalid)

                # Read loaded rows before __aexit__ rolls back and expires them
                info = SessionInfo(
                    user_id=str(record.id),
                    username=record.username,
                    created_at=session.created_at,
                    expires_at=session.expires_at,
                )
        except StoreUnavailableError as exc:
            logger.error(f"Session lookup aborted, store unavailable: {exc}")
            return Return.err(
                Error("STORE_UNAVAILABLE", "Authentication is temporarily unavailable")
            )
        except StoreError as exc:
            logger.exception(f"Session lookup aborted, store error: {exc}")
            return Return.err(Error("INTERNAL_ERROR", "Session lookup failed unexpectedly"))

        return Return.ok(info)
