
from fastapi import APIRouter, Depends, status

from src.api.error import ServerError
from src.app.errors import StoreError, StoreUnavailableError
from src.app.services.unit_of_work import UnitOfWork
from src.depends import get_unit_of_work
from src.domain.result import Error

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Liveness plus a round-trip to the database"""
    try:
        async with uow:
            await uow.ping()
    except StoreUnavailableError as exc:
        raise ServerError(
            Error("STORE_UNAVAILABLE", str(exc)),
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    except StoreError as exc:
        raise ServerError(Error("INTERNAL_ERROR", str(exc)))

    return {"status": "ok"}
