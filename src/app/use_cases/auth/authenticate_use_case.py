"""
Authenticate Use Case

Verifies a username/password pair and issues a new session.
"""

import logging
from datetime import timedelta
from typing import Optional

from src.app.errors import StoreError, StoreUnavailableError
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Error, Result, Return
from .dtos import AuthenticatedSession

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid username or password")
STORE_UNAVAILABLE = Error(
    "STORE_UNAVAILABLE", "Authentication is temporarily unavailable"
)
INTERNAL_ERROR = Error("INTERNAL_ERROR", "Authentication failed unexpectedly")


class AuthenticateUseCase:
    """
    Use case for credential verification and session issuance.

    Business Rules:
    - Unknown usernames are verified against a dummy hash so both failure
      paths cost the same bcrypt work
    - Wrong username and wrong password yield the same error
    - A new session token is issued on every successful login
    - The session presented at login (if any) is invalidated
    - With single_session, all earlier sessions of the user are revoked
    - Nothing is written unless verification succeeds
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: IPasswordHasher,
        session_ttl: timedelta,
        single_session: bool = True,
    ):
        self.uow = uow
        self.hasher = hasher
        self.session_ttl = session_ttl
        self.single_session = single_session

    async def execute(
        self,
        username: str,
        password: str,
        previous_session_id: Optional[str] = None,
    ) -> Result[AuthenticatedSession]:
        """
        Execute authenticate use case.

        Args:
            username: Username as received from the client
            password: Plain text password as received from the client
            previous_session_id: Session token the client already holds, if any

        Returns:
            Result with AuthenticatedSession, or Error
        """
        try:
            async with self.uow:
                record = await self.uow.credentials.find_by_username(username)

                # Always pay for one hash check, whether or not the user exists
                password_hash = (
                    record.password_hash if record is not None else self.hasher.dummy_hash
                )
                try:
                    password_valid = await self.hasher.verify(password, password_hash)
                except ValueError:
                    logger.error(
                        f"Stored password hash is malformed for user_id={record.id}"
                    )
                    return Return.err(INTERNAL_ERROR)

                if record is None or not password_valid:
                    logger.info("Login failed: invalid credentials")
                    return Return.err(INVALID_CREDENTIALS)

                # Session fixation: never keep a token issued before login
                if previous_session_id:
                    await self.uow.sessions.invalidate(previous_session_id)

                if self.single_session:
                    revoked = await self.uow.sessions.revoke_all_by_user_id(record.id)
                    if revoked:
                        logger.info(
                            f"Revoked {revoked} earlier session(s) for user_id={record.id}"
                        )

                session_id, session = await self.uow.sessions.create(
                    record.id, self.session_ttl
                )

                await self.uow.commit()

                # Read loaded rows before __aexit__ rolls back and expires them
                issued = AuthenticatedSession(
                    session_id=session_id,
                    user_id=str(record.id),
                    created_at=session.created_at,
                    expires_at=session.expires_at,
                )
        except StoreUnavailableError as exc:
            logger.error(f"Login aborted, store unavailable: {exc}")
            return Return.err(STORE_UNAVAILABLE)
        except StoreError as exc:
            logger.exception(f"Login aborted, store error: {exc}")
            return Return.err(INTERNAL_ERROR)

        logger.info(f"Login succeeded for user_id={issued.user_id}")
        return Return.ok(issued)
