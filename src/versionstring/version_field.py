"""Models a single dot-separated component of a version."""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    model_validator,
)

from .types import UInt64

WIRE_NAMES = {name.lower(): name for name in ("IsStr", "NumValue", "StrValue")}


class VersionField(BaseModel):
    """One component of a version string.

    A tagged union: ``num_value`` is meaningful when ``is_string`` is false,
    ``str_value`` when it is true. Parsing only ever produces numeric fields;
    the string variant is kept so stored payloads that carry it still load.

    Wire names are matched case-insensitively, unknown keys are ignored and a
    null value (or a null field object) leaves the defaults in place.

    Attributes:
        is_string: Whether ``str_value`` rather than ``num_value`` is active.
        num_value: Unsigned 64-bit numeric value.
        str_value: Ordered string value.
    """

    model_config = ConfigDict(
        frozen=True,
        validate_by_alias=True,
        validate_by_name=True,
        serialize_by_alias=True,
    )

    is_string: StrictBool = Field(default=False, alias="IsStr")
    num_value: UInt64 = Field(default=0, alias="NumValue")
    str_value: StrictStr = Field(default="", alias="StrValue")

    @model_validator(mode="before")
    @classmethod
    def _match_wire_names(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data

        matched = {}
        for key, value in data.items():
            if value is None:
                continue
            name = WIRE_NAMES.get(key.lower(), key) if isinstance(key, str) else key
            matched[name] = value
        return matched
