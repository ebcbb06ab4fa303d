"""Session document endpoints, keyed by username."""

from fastapi import APIRouter, Depends, Request

from user_sessions.api.responses import json_body
from user_sessions.services.dependencies import get_session_handler
from user_sessions.services.session_handler import SessionHandler

router = APIRouter(tags=["sessions"])


@router.get("/{username}")
async def get_session(
    username: str, handler: SessionHandler = Depends(get_session_handler)
):
    """Return the user's canonical session document, or an empty body."""
    return json_body(handler.fetch(username))


@router.api_route("/{username}", methods=["PUT", "POST"])
async def replace_session(
    username: str,
    request: Request,
    handler: SessionHandler = Depends(get_session_handler),
):
    """
    Store the raw request body as the user's session.

    PUT and POST behave the same: insert when the user has no session yet,
    update otherwise. Responds with the stored document under "session".
    """
    body = await request.body()
    return json_body(handler.replace(username, body))


@router.delete("/{username}")
async def delete_session(
    username: str, handler: SessionHandler = Depends(get_session_handler)
):
    """Delete the user's session. Succeeds whether or not one existed."""
    return json_body(handler.delete(username))
