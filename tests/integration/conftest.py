import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_password_hasher, get_unit_of_work

# Parent directory does not exist, so every connection attempt fails
UNREACHABLE_DB_URI = "sqlite+aiosqlite:////nonexistent-dir/credential_gate.db"


@pytest.fixture(scope="session")
def hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


def _build_app(override_get_unit_of_work, hasher):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)
    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: hasher
    return app


async def _client_for(app):
    # https: the session cookie is Secure
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="https://test")


@pytest_asyncio.fixture
async def client(db_session, hasher):
    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    async with await _client_for(_build_app(override_get_unit_of_work, hasher)) as ac:
        yield ac


@pytest_asyncio.fixture
async def case_insensitive_client(db_session, hasher):
    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session, username_case_sensitive=False)

    async with await _client_for(_build_app(override_get_unit_of_work, hasher)) as ac:
        yield ac


@pytest_asyncio.fixture
async def unavailable_client(hasher):
    engine = create_async_engine(UNREACHABLE_DB_URI)
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_unit_of_work():
        async with Session() as session:
            yield SqlAlchemyUnitOfWork(session)

    async with await _client_for(_build_app(override_get_unit_of_work, hasher)) as ac:
        yield ac
    await engine.dispose()


@pytest_asyncio.fixture
async def create_credential(db_session, hasher):
    """Provision a credential record directly through the repository"""

    async def _create(username: str, password: str):
        async with SqlAlchemyUnitOfWork(db_session) as uow:
            record = await uow.credentials.create(username, hasher.hash(password))
            await uow.commit()
        return record

    return _create
