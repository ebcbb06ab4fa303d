"""Plain-text error responses and JSON body helpers."""

from fastapi import status
from fastapi.responses import PlainTextResponse, Response


def bad_request(msg: str) -> PlainTextResponse:
    """Client-fault response: the message and a newline, status 400."""
    return PlainTextResponse(f"{msg}\n", status_code=status.HTTP_400_BAD_REQUEST)


def errored(msg: str) -> PlainTextResponse:
    """Server-fault response: the message and a newline, status 500."""
    return PlainTextResponse(
        f"{msg}\n", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def json_body(body: bytes) -> Response:
    """200 with an already-encoded JSON body, or an empty 200 when there is none."""
    if not body:
        return Response(status_code=status.HTTP_200_OK)
    return Response(content=body, media_type="application/json")
