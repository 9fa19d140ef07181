from datetime import datetime

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.cookies import clear_session_cookie, set_session_cookie
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthenticateUseCase,
    LoadSessionUseCase,
    LogoutUseCase,
    LogoutResponse,
    SessionInfo,
)
from src.depends import get_authenticate_use_case, get_session_token, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Username and password are treated as opaque strings; no trimming or
    normalisation happens here.
    """

    username: str = Field(..., max_length=255, description="Account username")
    password: str = Field(..., description="Account password")


class LoginResponse(BaseModel):
    """Login HTTP response; the session token travels only in the cookie"""

    user_id: str
    expires_at: datetime


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    previous_session_id: str = Depends(get_session_token),
    use_case: AuthenticateUseCase = Depends(get_authenticate_use_case),
):
    """
    User Login

    Verifies credentials and issues a fresh session cookie. A session cookie
    sent with the request is invalidated, never reused.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 503 Service Unavailable: Credential or session store unreachable
        - 500 Internal Server Error: Server error
    """
    result = await use_case.execute(
        request.username, request.password, previous_session_id or None
    )

    if result.is_err():
        raise_for_error(
            result.error,
            {"INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED},
        )

    issued = result.value
    set_session_cookie(response, issued.session_id)

    return LoginResponse(user_id=issued.user_id, expires_at=issued.expires_at)


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(
    response: Response,
    session_id: str = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Logout

    Invalidates the current session and clears the cookie. Succeeds even
    without a session cookie.

    Raises:
        - 503 Service Unavailable: Session store unreachable
        - 500 Internal Server Error: Server error
    """
    if session_id:
        use_case = LogoutUseCase(uow)
        result = await use_case.execute(session_id)

        if result.is_err():
            raise_for_error(result.error, {})

    clear_session_cookie(response)

    return LogoutResponse(status="success", message="Logged out")


@router.get("/session", status_code=status.HTTP_200_OK, response_model=SessionInfo)
async def current_session(
    session_id: str = Depends(get_session_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Current Session

    Returns the user behind the session cookie.

    Raises:
        - 401 Unauthorized: Missing, unknown, revoked or expired session
        - 503 Service Unavailable: Session store unreachable
    """
    use_case = LoadSessionUseCase(uow)
    result = await use_case.execute(session_id)

    if result.is_err():
        raise_for_error(
            result.error,
            {"INVALID_SESSION": status.HTTP_401_UNAUTHORIZED},
        )

    return result.value
