import pytest
from sqlalchemy.exc import IntegrityError, OperationalError, TimeoutError as PoolTimeoutError

from src.adapter.errors import translate_store_errors
from src.app.errors import StoreError, StoreUnavailableError


def failing(exc):
    @translate_store_errors
    async def call():
        raise exc

    return call


@pytest.mark.asyncio
async def test_operational_error_means_unavailable():
    exc = OperationalError("SELECT 1", {}, Exception("unable to open database file"))

    with pytest.raises(StoreUnavailableError) as info:
        await failing(exc)()

    assert info.value.__cause__ is exc
    assert "OperationalError" in str(info.value)


@pytest.mark.asyncio
async def test_pool_timeout_means_unavailable():
    with pytest.raises(StoreUnavailableError):
        await failing(PoolTimeoutError("QueuePool limit reached"))()


@pytest.mark.asyncio
async def test_os_connection_error_means_unavailable():
    with pytest.raises(StoreUnavailableError):
        await failing(ConnectionRefusedError(111, "Connection refused"))()


@pytest.mark.asyncio
async def test_other_sqlalchemy_errors_are_store_errors():
    exc = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

    with pytest.raises(StoreError) as info:
        await failing(exc)()

    assert not isinstance(info.value, StoreUnavailableError)


@pytest.mark.asyncio
async def test_non_store_errors_pass_through():
    with pytest.raises(KeyError):
        await failing(KeyError("x"))()


@pytest.mark.asyncio
async def test_return_value_is_preserved():
    @translate_store_errors
    async def call(value):
        return value * 2

    assert await call(21) == 42
