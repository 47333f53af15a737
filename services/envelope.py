"""
Envelope handling for preferences and session documents.

Clients have historically stored these documents both bare
(``{"foo": "bar"}``) and wrapped under a named key
(``{"preferences": {"foo": "bar"}}``). ``normalize`` turns either shape into
the one the caller asked for.
"""

import json
from typing import Any

from core.exceptions import MalformedPayloadError

PREFERENCES_KEY = "preferences"
SESSION_KEY = "session"


def normalize(raw_payload: str, wrap: bool, key: str) -> Any:
    """
    Parse a stored document and return it bare or wrapped under ``key``.

    A top-level ``key`` entry always marks the document as already wrapped;
    its value is not inspected further, and a wrapped document is returned
    as stored when ``wrap`` is True.

    Args:
        raw_payload: Stored JSON text. Empty means no document.
        wrap: Return ``{key: payload}`` when True, the bare payload otherwise.
        key: Envelope key, e.g. ``"preferences"``.

    Raises:
        MalformedPayloadError: If the text is not a JSON object
    """
    if not raw_payload:
        return {}

    try:
        values = json.loads(raw_payload)
    except ValueError as e:
        raise MalformedPayloadError(
            message=f"Stored {key} document is not valid JSON: {e}",
        ) from e

    if values is None:
        return {}
    if not isinstance(values, dict):
        raise MalformedPayloadError(
            message=f"Stored {key} document is not a JSON object",
        )

    if key in values:
        if wrap:
            return values
        return values[key]

    if wrap:
        return {key: values}
    return values
