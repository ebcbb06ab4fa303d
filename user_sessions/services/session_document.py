"""
Session document normalization.

Stored session text comes in two shapes. Current records hold the client's
document directly; records written by an earlier schema hold it inside a
``{"session": {...}}`` envelope. ``convert`` reconciles both into the
canonical document.
"""

import json
from typing import Any, Dict, List, Union

from user_sessions.services.errors import MalformedSessionError

JSONValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
SessionDocument = Dict[str, JSONValue]

ENVELOPE_KEY = "session"


def convert(raw: str, wrap: bool = False) -> SessionDocument:
    """
    Normalize stored session text into its canonical document.

    Args:
        raw: Session text exactly as stored
        wrap: Nest the result under a single "session" key for the wire

    Returns:
        Canonical document, or ``{"session": <document>}`` when wrap is set.
        Empty text always gives an empty document.

    Raises:
        MalformedSessionError: Text is not JSON or not a JSON object
    """
    if raw == "":
        return {}

    try:
        parsed = json.loads(raw)
    except ValueError as e:
        raise MalformedSessionError(str(e)) from e

    if not isinstance(parsed, dict):
        raise MalformedSessionError(
            f"session must be a JSON object, got {type(parsed).__name__}"
        )

    document = parsed
    # Legacy envelope: "session" must be the only key and hold an object
    if len(parsed) == 1 and isinstance(parsed.get(ENVELOPE_KEY), dict):
        document = parsed[ENVELOPE_KEY]

    if wrap:
        return {ENVELOPE_KEY: document}
    return document


def serialize(document: SessionDocument) -> bytes:
    """Encode a document as compact JSON with sorted keys."""
    return json.dumps(
        document, separators=(",", ":"), sort_keys=True, ensure_ascii=False
    ).encode("utf-8")
