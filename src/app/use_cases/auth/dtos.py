"""
Authentication Use Case DTOs (Data Transfer Objects)

All Response classes for the auth domain.
"""

from datetime import datetime

from pydantic import BaseModel


# ============================================================================
# Response DTOs
# ============================================================================


class AuthenticatedSession(BaseModel):
    """Freshly issued session returned by a successful login"""

    session_id: str
    user_id: str
    created_at: datetime
    expires_at: datetime


class SessionInfo(BaseModel):
    """Active session resolved from a presented session token"""

    user_id: str
    username: str
    created_at: datetime
    expires_at: datetime


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    status: str
    message: str
