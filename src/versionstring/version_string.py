"""Models a dot-separated numeric version and its two JSON shapes."""

import logging
from typing import Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    model_validator,
)

from ._payload import describe_token, is_legacy_shape, load_json, payload_text
from .config import get_settings
from .exceptions import (
    EmptyVersionError,
    JsonFramingError,
    MalformedVersionError,
    UnknownFieldError,
)
from .types import UINT64_MAX, JsonPayload, JsonValue, VersionData
from .version_field import VersionField

logger = logging.getLogger(__name__)

JSON_FIELD_NAMES = frozenset({"Version", "Fields", "OrderedVersion"})
NULL_VERSION_TEXT = frozenset({"", "null"})


def parse_uint64(text: str) -> int:
    """Parse a base-10 unsigned 64-bit integer.

    Only ASCII digits are accepted: no sign, whitespace or underscores.

    Args:
        text: The text to parse.

    Returns:
        The parsed integer.

    Raises:
        ValueError: If the text is not a number or does not fit in 64 bits.
    """
    if not (text.isascii() and text.isdigit()):
        raise ValueError(f"invalid syntax: {text!r}")
    value = int(text)
    if value > UINT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return value


def _null_version() -> VersionData:
    return {"Version": "", "Fields": None, "OrderedVersion": False}


def _parse_version(s: str) -> VersionData:
    s = s.strip()
    if not s:
        raise EmptyVersionError

    fields = []
    for i, component in enumerate(s.split(".")):
        try:
            value = parse_uint64(component)
        except ValueError as e:
            raise MalformedVersionError(i, component, s) from e
        fields.append(VersionField(is_string=False, num_value=value))

    return {"Version": s, "Fields": fields, "OrderedVersion": False}


class VersionString(BaseModel):
    """A version such as ``1.2.3.4`` together with its parsed components.

    Decoding accepts either the structured object written by ``encode`` or the
    legacy bare string (``"1.2.3.4"``, ``""`` or ``null``). Both shapes are
    also accepted when a VersionString is nested inside another model. Objects
    may only use the wire names ``Version``, ``Fields`` and ``OrderedVersion``;
    a null value leaves that field at its default.

    Attributes:
        version: The trimmed raw version, empty for a null version.
        fields: One VersionField per dot-separated component, None for a null
            version.
        ordered_version: Whether ``version`` itself should be ordered as a
            string. Parsing never sets it.

    Example:
        >>> v = VersionString.from_string("1.2.3.4")
        >>> [f.num_value for f in v.fields]
        [1, 2, 3, 4]
        >>> VersionString.decode(b'"1.2.3.4"') == v
        True
    """

    model_config = ConfigDict(
        frozen=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )

    version: StrictStr = Field(default="", alias="Version")
    fields: tuple[VersionField, ...] | None = Field(default=None, alias="Fields")
    ordered_version: StrictBool = Field(default=False, alias="OrderedVersion")

    @model_validator(mode="before")
    @classmethod
    def _accept_wire_shapes(cls, data: Any) -> Any:
        if data is None or isinstance(data, str):
            if data is None or data in NULL_VERSION_TEXT:
                return _null_version()
            return _parse_version(data)
        if isinstance(data, dict):
            for key in data:
                if key not in JSON_FIELD_NAMES:
                    raise UnknownFieldError(cls.__name__, str(key))
            # null values leave the field at its default
            return {key: value for key, value in data.items() if value is not None}
        return data

    @classmethod
    def from_string(cls, s: str) -> Self:
        """Parse a dot-separated numeric version.

        Args:
            s: Version string, surrounding whitespace allowed.

        Returns:
            Parsed VersionString.

        Raises:
            EmptyVersionError: If ``s`` is empty after trimming.
            MalformedVersionError: If a component is not an unsigned integer.
        """
        return cls.model_validate(_parse_version(s))

    @classmethod
    def from_json_value(cls, value: JsonValue) -> Self:
        """Build a VersionString from an already parsed JSON value.

        Args:
            value: A string, None, or a structured object.

        Returns:
            Decoded VersionString.

        Raises:
            JsonFramingError: If ``value`` is neither a string, null nor object.
            UnknownFieldError: If the object has an unrecognized key.
            ValidationError: If a field value has the wrong type.
        """
        if not (value is None or isinstance(value, str | dict)):
            raise JsonFramingError(cls.__name__, "'{'", describe_token(value))
        return cls.model_validate(value)

    @classmethod
    def decode(cls, payload: JsonPayload) -> Self:
        """Decode a JSON payload in either the legacy or structured shape.

        Args:
            payload: Raw JSON as bytes or str.

        Returns:
            Decoded VersionString.

        Raises:
            EmptyVersionError: If a legacy string holds only whitespace.
            MalformedVersionError: If a legacy string is not a valid version.
            JsonFramingError: If the payload is not valid JSON or not an object.
            UnknownFieldError: If the object has an unrecognized key.
            ValidationError: If a field value has the wrong type.
        """
        text = payload_text(payload, cls.__name__)
        value = load_json(text, cls.__name__)
        if is_legacy_shape(text):
            logger.debug("Decoding %s from legacy string shape", cls.__name__)
            return cls.model_validate(value)
        return cls.from_json_value(value)

    def encode(self: Self) -> bytes:
        """Encode as a structured JSON object.

        Returns:
            JSON with the keys ``Version``, ``Fields`` and ``OrderedVersion``.
        """
        if get_settings().simple_string_unmarshal:
            logger.debug(
                "Plain string output requested for %r, writing structured form",
                self.version,
            )
        return self.model_dump_json(by_alias=True).encode()

    def to_dict(self: Self) -> VersionData:
        """Return the structured form as JSON-compatible data."""
        return self.model_dump(mode="json", by_alias=True)

    @property
    def is_null(self: Self) -> bool:
        """Whether this is the null version."""
        return not self.version

    def __str__(self: Self) -> str:
        """Return the raw version string."""
        return self.version
