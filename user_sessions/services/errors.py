"""Error kinds surfaced by the session services."""


class SessionServiceError(Exception):
    """Base class for session service failures."""

    pass


class UnknownUserError(SessionServiceError):
    """A write referenced a username with no user row."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"user {username} does not exist")


class MalformedSessionError(SessionServiceError):
    """Session text could not be parsed as a JSON object."""

    pass


class StoreFailure(SessionServiceError):
    """The database rejected or failed a store operation."""

    pass
