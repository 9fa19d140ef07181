import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.password_hasher import BcryptPasswordHasher


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with credential and session repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.credentials = MagicMock()
    uow.credentials.find_by_username = AsyncMock()
    uow.credentials.get_by_id = AsyncMock()

    uow.sessions = MagicMock()
    uow.sessions.create = AsyncMock()
    uow.sessions.invalidate = AsyncMock(return_value=False)
    uow.sessions.get_active = AsyncMock()
    uow.sessions.revoke_all_by_user_id = AsyncMock(return_value=0)

    return uow


@pytest.fixture(scope="session")
def hasher():
    """Real bcrypt hasher at the minimum cost factor to keep tests fast"""
    return BcryptPasswordHasher(rounds=4)
