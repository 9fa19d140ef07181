from fastapi import Response

from config import ApplicationConfig


def set_session_cookie(response: Response, session_id: str) -> None:
    """
    Attach the session token as an HttpOnly cookie.

    The cookie lifetime matches the server-side session TTL.
    """
    response.set_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        value=session_id,
        max_age=ApplicationConfig.SESSION_TTL_SECONDS,
        path=ApplicationConfig.SESSION_COOKIE_PATH,
        secure=ApplicationConfig.SESSION_COOKIE_SECURE,
        httponly=True,
        samesite=ApplicationConfig.SESSION_COOKIE_SAMESITE,
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=ApplicationConfig.SESSION_COOKIE_NAME,
        path=ApplicationConfig.SESSION_COOKIE_PATH,
        secure=ApplicationConfig.SESSION_COOKIE_SECURE,
        httponly=True,
        samesite=ApplicationConfig.SESSION_COOKIE_SAMESITE,
    )
