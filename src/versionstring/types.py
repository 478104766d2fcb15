"""Type aliases needed in the package."""

from typing import Annotated, Any, TypeAlias

from pydantic import Field, StrictInt

UINT64_MAX = 2**64 - 1

UInt64: TypeAlias = Annotated[StrictInt, Field(ge=0, le=UINT64_MAX)]

JsonPayload: TypeAlias = bytes | str
JsonValue: TypeAlias = dict[str, Any] | list[Any] | str | int | float | bool | None
VersionData: TypeAlias = dict[str, Any]
