"""
Use Cases

Organized into domain folders:
- auth/: Authentication and session lifecycle
"""

from .auth import (
    AuthenticateUseCase,
    LoadSessionUseCase,
    LogoutUseCase,
)

__all__ = [
    # Auth
    "AuthenticateUseCase",
    "LoadSessionUseCase",
    "LogoutUseCase",
]
