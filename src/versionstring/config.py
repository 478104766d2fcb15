"""Settings for versionstring.

Settings are read from ``[tool.versionstring]`` in ``pyproject.toml`` or from
``[versionstring]`` in ``versionstring.toml``.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

PYPROJECT_FILE = "pyproject.toml"
CONFIG_FILE = "versionstring.toml"


class VersionStringSettings(BaseModel):
    """Process-wide settings.

    Attributes:
        simple_string_unmarshal: Requests the plain string form when encoding a
            VersionString. Encoding does not honor it yet and always writes the
            structured object; the value is only read.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_by_alias=True,
        validate_by_name=True,
    )

    simple_string_unmarshal: StrictBool = Field(
        default=False, alias="SimpleStringUnmarshalForVersionString"
    )


_settings = VersionStringSettings()


def get_settings() -> VersionStringSettings:
    """Return the active settings."""
    return _settings


def configure(settings: VersionStringSettings) -> None:
    """Install process-wide settings.

    Args:
        settings: Settings to use from now on.
    """
    global _settings  # noqa: PLW0603
    _settings = settings


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def _section(path: Path, data: dict[str, Any]) -> dict[str, Any]:
    if path.name == PYPROJECT_FILE:
        tool = data.get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError(f"[tool] in {path} must be a table")
        section = tool.get("versionstring", {})
    else:
        section = data.get("versionstring", {})
    if not isinstance(section, dict):
        raise ConfigError(f"versionstring settings in {path} must be a table")
    return section


def find_config_file(directory: Path | None = None) -> Path | None:
    """Find the config file in a directory.

    ``versionstring.toml`` takes precedence over ``pyproject.toml``.

    Args:
        directory: Directory to search. Defaults to the current directory.

    Returns:
        Path to the config file, or None if neither exists.
    """
    directory = directory or Path.cwd()
    for name in (CONFIG_FILE, PYPROJECT_FILE):
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def load_settings(path: Path | None = None) -> VersionStringSettings:
    """Load settings from a config file.

    Args:
        path: Explicit config file. When omitted the current directory is
            searched and defaults are returned if nothing is found.

    Returns:
        The loaded settings.

    Raises:
        ConfigError: If the file is missing, unreadable or holds invalid values.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No config file found, using default settings")
            return VersionStringSettings()

    section = _section(path, _read_toml(path))
    try:
        settings = VersionStringSettings.model_validate(section)
    except ValidationError as e:
        raise ConfigError(f"Invalid versionstring settings in {path}: {e}") from e

    logger.debug("Loaded settings from %s", path)
    return settings
