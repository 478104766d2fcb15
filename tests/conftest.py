"""Shared fixtures."""

from collections.abc import Iterator
from typing import Any

import pytest

from versionstring import VersionStringSettings, configure


@pytest.fixture(autouse=True)
def default_settings() -> Iterator[None]:
    """Restore default settings after each test."""
    configure(VersionStringSettings())
    yield
    configure(VersionStringSettings())


@pytest.fixture
def structured_1234() -> dict[str, Any]:
    """Structured form of version 1.2.3.4."""
    return {
        "Version": "1.2.3.4",
        "Fields": [
            {"IsStr": False, "NumValue": n, "StrValue": ""} for n in (1, 2, 3, 4)
        ],
        "OrderedVersion": False,
    }


@pytest.fixture
def structured_0126() -> dict[str, Any]:
    """Structured form of version 0.1.2.6."""
    return {
        "Version": "0.1.2.6",
        "Fields": [
            {"IsStr": False, "NumValue": n, "StrValue": ""} for n in (0, 1, 2, 6)
        ],
        "OrderedVersion": False,
    }
