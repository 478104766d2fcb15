"""Helpers for inspecting raw JSON payloads before decoding them."""

import json

from .exceptions import JsonFramingError
from .types import JsonPayload, JsonValue


def payload_text(payload: JsonPayload, type_name: str) -> str:
    """Return the payload as text with surrounding whitespace removed.

    Args:
        payload: Raw JSON as bytes or str.
        type_name: Name of the type being decoded, used in errors.

    Returns:
        The stripped JSON text.

    Raises:
        JsonFramingError: If bytes are not valid UTF-8.
    """
    if isinstance(payload, bytes):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise JsonFramingError(
                type_name, "UTF-8 JSON text", "undecodable bytes"
            ) from e
    return payload.strip()


def is_legacy_shape(text: str) -> bool:
    """Check whether a payload holds the legacy string-or-null shape.

    Only the first significant character is inspected, so the check is cheap
    and never parses the payload.

    Args:
        text: Stripped JSON text.

    Returns:
        True for a JSON string or a literal ``null``.
    """
    return text.startswith('"') or text == "null"


def load_json(text: str, type_name: str) -> JsonValue:
    """Parse JSON text.

    Args:
        text: JSON text.
        type_name: Name of the type being decoded, used in errors.

    Returns:
        The parsed value.

    Raises:
        JsonFramingError: If the text is not valid JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise JsonFramingError(
            type_name, "a JSON value", f"{e.msg} at position {e.pos}"
        ) from e


def describe_token(value: JsonValue) -> str:
    """Describe the opening token of a parsed JSON value for error messages."""
    match value:
        case dict():
            return "'{'"
        case list():
            return "'['"
        case None:
            return "null"
        case bool():
            return f"bool ({str(value).lower()})"
        case str():
            return f"string ({value!r})"
        case _:
            return f"number ({value})"
