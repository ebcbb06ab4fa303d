"""Stored session document for a user."""

from sqlalchemy import Column, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship

from user_sessions.database import Base


class UserSession(Base):
    """Opaque JSON session payload; one row per user in practice."""

    __tablename__ = "user_sessions"

    id = Column(Integer, primary_key=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    session = Column(Text, nullable=False, default="")

    # Relationships
    user = relationship("User", back_populates="sessions")
