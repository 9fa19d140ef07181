from fastapi import status
from src.domain.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """5xx error; the base error's message is logged, never returned"""

    def __init__(
        self, base_error: Error, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    ):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


def raise_for_error(error: Error, client_errors: dict) -> None:
    """Map a use case error code to the matching HTTP exception"""
    if error.code in client_errors:
        raise ClientError(error, status_code=client_errors[error.code])
    if error.code == "STORE_UNAVAILABLE":
        raise ServerError(error, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)
    raise ServerError(error)
