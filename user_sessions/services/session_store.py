"""Persistence for user session documents."""

import logging
from dataclasses import dataclass
from functools import wraps
from typing import List, Optional, Protocol

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from user_sessions.models.user import User
from user_sessions.models.user_session import UserSession
from user_sessions.services.errors import StoreFailure, UnknownUserError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionRecord:
    """A stored session row. ``session`` is the raw JSON text."""

    id: int
    user_id: int
    session: str


class SessionStore(Protocol):
    """Contract the session handler is built against. Operations take usernames."""

    def is_user(self, username: str) -> bool:
        ...

    def has_session(self, username: str) -> bool:
        ...

    def get_sessions(self, username: str) -> List[SessionRecord]:
        ...

    def insert_session(self, username: str, session: str) -> None:
        ...

    def update_session(self, username: str, session: str) -> None:
        ...

    def delete_session(self, username: str) -> None:
        ...


def wrap_store_errors(method):
    """Roll back and re-raise database errors as StoreFailure."""

    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except SQLAlchemyError as e:
            self.db.rollback()
            message = str(getattr(e, "orig", None) or e)
            logger.error("%s failed: %s", method.__name__, message)
            raise StoreFailure(message) from e

    return wrapper


class SqlSessionStore:
    """SQLAlchemy-backed session store over the users and user_sessions tables."""

    def __init__(self, db: Session):
        self.db = db

    def _user_id(self, username: str) -> Optional[int]:
        return self.db.scalar(select(User.id).where(User.username == username))

    def _require_user_id(self, username: str) -> int:
        user_id = self._user_id(username)
        if user_id is None:
            raise UnknownUserError(username)
        return user_id

    @wrap_store_errors
    def is_user(self, username: str) -> bool:
        """Check whether a user with this username exists."""
        return self._user_id(username) is not None

    @wrap_store_errors
    def has_session(self, username: str) -> bool:
        """
        Check whether the user has a stored session row.

        Unknown users simply have no session. Any existing row counts, even one
        holding empty text.
        """
        count = self.db.scalar(
            select(func.count(UserSession.id))
            .select_from(UserSession)
            .join(User, UserSession.user_id == User.id)
            .where(User.username == username)
        )
        return bool(count)

    @wrap_store_errors
    def get_sessions(self, username: str) -> List[SessionRecord]:
        """Get all session rows for a user, most recent first."""
        rows = self.db.execute(
            select(UserSession.id, UserSession.user_id, UserSession.session)
            .join(User, UserSession.user_id == User.id)
            .where(User.username == username)
            .order_by(UserSession.id.desc())
        ).all()
        return [
            SessionRecord(id=row.id, user_id=row.user_id, session=row.session)
            for row in rows
        ]

    @wrap_store_errors
    def insert_session(self, username: str, session: str) -> None:
        """
        Add a session row for a user.

        Args:
            username: Owning user's username
            session: JSON text, stored verbatim

        Raises:
            UnknownUserError: No user has this username
        """
        user_id = self._require_user_id(username)
        self.db.add(UserSession(user_id=user_id, session=session))
        self.db.commit()

    @wrap_store_errors
    def update_session(self, username: str, session: str) -> None:
        """
        Overwrite the session text of the user's rows.

        Touching zero rows is not an error; callers insert first.

        Raises:
            UnknownUserError: No user has this username
        """
        user_id = self._require_user_id(username)
        self.db.execute(
            update(UserSession)
            .where(UserSession.user_id == user_id)
            .values(session=session)
        )
        self.db.commit()

    @wrap_store_errors
    def delete_session(self, username: str) -> None:
        """Delete every session row for a user. Missing rows or users are fine."""
        user_id = self._user_id(username)
        if user_id is None:
            return
        self.db.execute(delete(UserSession).where(UserSession.user_id == user_id))
        self.db.commit()
