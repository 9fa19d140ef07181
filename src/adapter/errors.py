import functools

from sqlalchemy.exc import (
    DisconnectionError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)

from src.app.errors import StoreError, StoreUnavailableError

# Failures that mean "cannot reach the database" rather than "the query was wrong"
_UNAVAILABLE_ERRORS = (
    OperationalError,
    InterfaceError,
    DisconnectionError,
    PoolTimeoutError,
    ConnectionError,
    TimeoutError,
)


def translate_store_errors(func):
    """Re-raise driver and SQLAlchemy failures as application store errors"""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except StoreError:
            raise
        except _UNAVAILABLE_ERRORS as exc:
            raise StoreUnavailableError(f"{type(exc).__name__}: {exc}") from exc
        except SQLAlchemyError as exc:
            raise StoreError(f"{type(exc).__name__}: {exc}") from exc

    return wrapper
