"""Exceptions raised while parsing and decoding version strings.

None of these derive from ``ValueError``. Pydantic folds ``ValueError`` raised in
validators into a ``ValidationError``; these errors pass through validation
untouched so callers always see the specific failure.
"""

from typing import Self


class VersionStringError(Exception):
    """Base exception for all versionstring errors."""


class EmptyVersionError(VersionStringError):
    """Raised when a version string is empty or only whitespace."""

    def __init__(self: Self) -> None:
        """Initialize the error."""
        super().__init__("empty version string specified")


class MalformedVersionError(VersionStringError):
    """Raised when a dot-separated component is not an unsigned integer.

    Attributes:
        index: Zero-based position of the offending component.
        component: Text of the offending component.
        version: Full version string that was being parsed.
    """

    def __init__(self: Self, index: int, component: str, version: str) -> None:
        """Initialize the error.

        Args:
            index: Zero-based position of the offending component.
            component: Text of the offending component.
            version: Full version string that was being parsed.
        """
        self.index = index
        self.component = component
        self.version = version
        super().__init__(
            f"failed to convert field #{index} ({component!r}) to a number "
            f"in version {version!r}"
        )


class MalformedVersionListError(VersionStringError):
    """Raised when one part of a semicolon-separated version list is invalid.

    The underlying ``VersionStringError`` is available as ``__cause__``.

    Attributes:
        index: Zero-based position of the offending part.
        part: Text of the offending part.
        source: Full version list string that was being parsed.
    """

    def __init__(self: Self, index: int, part: str, source: str) -> None:
        """Initialize the error.

        Args:
            index: Zero-based position of the offending part.
            part: Text of the offending part.
            source: Full version list string that was being parsed.
        """
        self.index = index
        self.part = part
        self.source = source
        super().__init__(
            f"empty or malformed version string part[{index}] {part!r} in {source!r}"
        )


class JsonFramingError(VersionStringError):
    """Raised when a JSON payload does not have the expected framing.

    Attributes:
        type_name: Name of the type being decoded.
        expected: Description of the expected token.
        actual: Description of the token that was found.
    """

    def __init__(self: Self, type_name: str, expected: str, actual: str) -> None:
        """Initialize the error.

        Args:
            type_name: Name of the type being decoded.
            expected: Description of the expected token.
            actual: Description of the token that was found.
        """
        self.type_name = type_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"bad JSON token {actual} for {type_name}, expected {expected}"
        )


class UnknownFieldError(VersionStringError):
    """Raised when a structured payload contains an unrecognized key.

    Attributes:
        type_name: Name of the type being decoded.
        field_name: The unrecognized key.
    """

    def __init__(self: Self, type_name: str, field_name: str) -> None:
        """Initialize the error.

        Args:
            type_name: Name of the type being decoded.
            field_name: The unrecognized key.
        """
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(f"unknown field name {field_name!r} for {type_name} type")


class ConfigError(VersionStringError):
    """Raised when settings cannot be loaded."""
