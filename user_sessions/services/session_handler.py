"""Request-level session operations on top of a SessionStore."""

import logging

from user_sessions.services.errors import MalformedSessionError, UnknownUserError
from user_sessions.services.session_document import convert, serialize
from user_sessions.services.session_store import SessionStore

logger = logging.getLogger(__name__)


class SessionHandler:
    """Maps fetch/replace/delete requests for a username onto store calls."""

    def __init__(self, store: SessionStore):
        self.store = store

    def get_user_session_for_request(self, username: str, wrap: bool) -> bytes:
        """
        Load and normalize the user's most recent session.

        Args:
            username: User to look up
            wrap: Nest the document under a "session" key

        Returns:
            Serialized document, or empty bytes when the user has no session
        """
        if not self.store.has_session(username):
            return b""

        records = self.store.get_sessions(username)
        if not records:
            return b""

        return serialize(convert(records[0].session, wrap=wrap))

    def fetch(self, username: str) -> bytes:
        """Get the canonical session document. Unknown users read as empty."""
        return self.get_user_session_for_request(username, wrap=False)

    def replace(self, username: str, body: bytes) -> bytes:
        """
        Store the request body as the user's session.

        The existence check and the write are separate store calls, so two
        concurrent first writes can both take the insert branch.

        Returns:
            The written document wrapped under "session"

        Raises:
            UnknownUserError: No user has this username
            MalformedSessionError: Body is not UTF-8, or not a JSON object
        """
        if not self.store.is_user(username):
            raise UnknownUserError(username)

        try:
            session = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedSessionError(str(e)) from e

        if self.store.has_session(username):
            logger.info("Updating session for %s", username)
            self.store.update_session(username, session)
        else:
            logger.info("Inserting session for %s", username)
            self.store.insert_session(username, session)

        return serialize(convert(session, wrap=True))

    def delete(self, username: str) -> bytes:
        """Remove the user's session. Always succeeds when the store does."""
        self.store.delete_session(username)
        logger.info("Deleted session for %s", username)
        return b""
