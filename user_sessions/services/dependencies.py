"""FastAPI dependencies wiring the session handler to the database."""

from fastapi import Depends
from sqlalchemy.orm import Session

from user_sessions.database import get_db
from user_sessions.services.session_handler import SessionHandler
from user_sessions.services.session_store import SessionStore, SqlSessionStore


def get_session_store(db: Session = Depends(get_db)) -> SessionStore:
    """Session store bound to the request's database session."""
    return SqlSessionStore(db)


def get_session_handler(
    store: SessionStore = Depends(get_session_store),
) -> SessionHandler:
    return SessionHandler(store)
