"""
Database models for user-sessions.

Import all models here so ``init_database`` registers every table.
"""

from user_sessions.database import Base
from user_sessions.models.user import User
from user_sessions.models.user_session import UserSession

__all__ = [
    "Base",
    "User",
    "UserSession",
]
