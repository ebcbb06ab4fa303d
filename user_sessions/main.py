import logging

from fastapi import FastAPI, Request

from user_sessions.api import sessions
from user_sessions.api.responses import bad_request, errored
from user_sessions.services.errors import (
    MalformedSessionError,
    StoreFailure,
    UnknownUserError,
)

logger = logging.getLogger(__name__)

# Documentation routes would shadow usernames like "docs"
app = FastAPI(
    title="user-sessions",
    version="0.1.0",
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


@app.exception_handler(UnknownUserError)
async def unknown_user_handler(request: Request, exc: UnknownUserError):
    logger.warning(
        "Rejected %s %s: %s", request.method, request.url.path, exc
    )
    return bad_request(str(exc))


@app.exception_handler(MalformedSessionError)
async def malformed_session_handler(request: Request, exc: MalformedSessionError):
    """Unparseable session text is a data integrity problem, not a client mistake."""
    logger.error(
        "Malformed session on %s %s: %s", request.method, request.url.path, exc
    )
    return errored(str(exc))


@app.exception_handler(StoreFailure)
async def store_failure_handler(request: Request, exc: StoreFailure):
    logger.error(
        "Store failure on %s %s: %s", request.method, request.url.path, exc
    )
    return errored(str(exc))


# Include routers
app.include_router(sessions.router)
