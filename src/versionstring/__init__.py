"""versionstring - dot-separated numeric versions with dual-shape JSON.

A package for parsing numeric versions such as ``1.2.3.4`` and lists of them
such as ``1.2.3.4;0.1.2.6``, encoding them as structured JSON and decoding
either the structured form or the legacy plain-string form.
"""

from ._version import __version__
from .config import VersionStringSettings, configure, get_settings, load_settings
from .exceptions import (
    ConfigError,
    EmptyVersionError,
    JsonFramingError,
    MalformedVersionError,
    MalformedVersionListError,
    UnknownFieldError,
    VersionStringError,
)
from .types import JsonPayload, JsonValue
from .version_field import VersionField
from .version_string import VersionString
from .version_strings import VersionStrings

__all__ = [
    "ConfigError",
    "EmptyVersionError",
    "JsonFramingError",
    "JsonPayload",
    "JsonValue",
    "MalformedVersionError",
    "MalformedVersionListError",
    "UnknownFieldError",
    "VersionField",
    "VersionString",
    "VersionStringError",
    "VersionStringSettings",
    "VersionStrings",
    "__version__",
    "configure",
    "get_settings",
    "load_settings",
]
