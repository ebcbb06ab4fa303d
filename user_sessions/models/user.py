from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from user_sessions.database import Base


class User(Base):
    """Known user, resolved by username. Rows are owned by the identity system."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String(255), unique=True, index=True, nullable=False)

    # Relationships
    sessions = relationship(
        "UserSession", back_populates="user", cascade="all, delete-orphan"
    )
