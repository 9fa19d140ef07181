from datetime import timedelta
from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticateUseCase

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(
            session, username_case_sensitive=ApplicationConfig.USERNAME_CASE_SENSITIVE
        )


@lru_cache
def get_password_hasher() -> IPasswordHasher:
    # Built once: the dummy hash costs a full bcrypt round
    return BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)


def get_authenticate_use_case(
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: IPasswordHasher = Depends(get_password_hasher),
) -> AuthenticateUseCase:
    return AuthenticateUseCase(
        uow,
        hasher,
        session_ttl=timedelta(seconds=ApplicationConfig.SESSION_TTL_SECONDS),
        single_session=ApplicationConfig.SINGLE_SESSION_PER_USER,
    )


def get_session_token(request: Request) -> str:
    """Session token from the session cookie, or "" when absent"""
    return request.cookies.get(ApplicationConfig.SESSION_COOKIE_NAME, "")
