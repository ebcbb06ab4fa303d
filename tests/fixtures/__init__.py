"""Test fixtures for user-sessions."""

from tests.fixtures.mocks import MockSessionStore

__all__ = [
    "MockSessionStore",
]
