"""
Authentication Use Cases

All authentication-related business logic.
"""

from .authenticate_use_case import AuthenticateUseCase
from .logout_use_case import LogoutUseCase
from .load_session_use_case import LoadSessionUseCase
from .dtos import AuthenticatedSession, LogoutResponse, SessionInfo

__all__ = [
    # Use Cases
    "AuthenticateUseCase",
    "LogoutUseCase",
    "LoadSessionUseCase",
    # DTOs - Responses
    "AuthenticatedSession",
    "LogoutResponse",
    "SessionInfo",
]
