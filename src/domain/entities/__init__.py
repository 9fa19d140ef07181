"""
Domain Entities

Each entity in its own file.
"""

from .credential import CredentialRecord
from .session import Session

__all__ = [
    "CredentialRecord",
    "Session",
]
