"""Models a semicolon-separated list of versions."""

import logging
from collections.abc import Iterator
from typing import Any, Self

from pydantic import ConfigDict, RootModel, field_validator, model_validator

from ._payload import describe_token, is_legacy_shape, load_json, payload_text
from .exceptions import JsonFramingError, MalformedVersionListError, VersionStringError
from .types import JsonPayload
from .version_string import NULL_VERSION_TEXT, VersionString

logger = logging.getLogger(__name__)

LIST_SEPARATOR = ";"


def _parse_versions(s: str) -> tuple[VersionString, ...] | None:
    parts = s.split(LIST_SEPARATOR)
    if not parts:
        return None

    versions = []
    for i, part in enumerate(parts):
        try:
            versions.append(VersionString.from_string(part))
        except VersionStringError as e:
            raise MalformedVersionListError(i, part, s) from e
    return tuple(versions)


class VersionStrings(RootModel[tuple[VersionString, ...] | None]):
    """An ordered list of versions such as ``1.2.3.4;0.1.2.6``.

    Decoding accepts a JSON array of VersionString payloads or the legacy
    semicolon-joined string. An empty list is always stored as None.

    Example:
        >>> vs = VersionStrings.from_string("1.2.3.4;0.1.2.6")
        >>> [str(v) for v in vs]
        ['1.2.3.4', '0.1.2.6']
    """

    model_config = ConfigDict(frozen=True, serialize_by_alias=True)

    root: tuple[VersionString, ...] | None = None

    @model_validator(mode="before")
    @classmethod
    def _accept_legacy_shape(cls, data: Any) -> Any:
        if data is None or isinstance(data, str):
            if data is None or data in NULL_VERSION_TEXT:
                return None
            return _parse_versions(data)
        return data

    @field_validator("root")
    @classmethod
    def _empty_is_absent(
        cls, value: tuple[VersionString, ...] | None
    ) -> tuple[VersionString, ...] | None:
        return value or None

    @classmethod
    def from_string(cls, s: str) -> Self:
        """Parse a semicolon-separated list of versions.

        Empty parts are not skipped, so ``"1.2;"`` and ``";1.2"`` fail.

        Args:
            s: Versions joined with ``;``.

        Returns:
            Parsed VersionStrings.

        Raises:
            MalformedVersionListError: If any part fails to parse. The part's
                own error is chained as ``__cause__``.
        """
        return cls(_parse_versions(s))

    @classmethod
    def decode(cls, payload: JsonPayload) -> Self:
        """Decode a JSON payload in either the legacy or array shape.

        Args:
            payload: Raw JSON as bytes or str.

        Returns:
            Decoded VersionStrings.

        Raises:
            MalformedVersionListError: If a legacy string has an invalid part.
            JsonFramingError: If the payload is not valid JSON or not an array.
            VersionStringError: If an element fails to decode.
            ValidationError: If an element field has the wrong type.
        """
        text = payload_text(payload, cls.__name__)
        value = load_json(text, cls.__name__)
        if is_legacy_shape(text):
            logger.debug("Decoding %s from legacy string shape", cls.__name__)
            return cls.model_validate(value)
        if not isinstance(value, list):
            raise JsonFramingError(cls.__name__, "'['", describe_token(value))

        return cls([VersionString.from_json_value(item) for item in value])

    def encode(self: Self) -> bytes:
        """Encode as a JSON array of structured versions, or ``null``."""
        return self.model_dump_json(by_alias=True).encode()

    def __iter__(self: Self) -> Iterator[VersionString]:  # type: ignore[override]
        """Iterate over the versions."""
        return iter(self.root or ())

    def __len__(self: Self) -> int:
        """Return the number of versions."""
        return len(self.root or ())

    def __getitem__(self: Self, index: int) -> VersionString:
        """Return the version at ``index``."""
        return (self.root or ())[index]

    def __str__(self: Self) -> str:
        """Return the versions joined with ``;``."""
        return LIST_SEPARATOR.join(str(v) for v in self)
