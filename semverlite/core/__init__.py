from semverlite.core.part import Part
from semverlite.core.errors import (
    VersionError,
    ParseError,
    EmptyInputError,
    MalformedFormatError,
    InvalidComponentError,
)
from semverlite.core.version import (
    Version,
    compare,
    MAJOR_VALUE_SCALE,
    MINOR_VALUE_SCALE,
    UINT32_MAX,
)
from semverlite.core.changelog import increment
from semverlite.core.range import RangeResult, in_range

__all__ = [
    "Part",
    "VersionError",
    "ParseError",
    "EmptyInputError",
    "MalformedFormatError",
    "InvalidComponentError",
    "Version",
    "compare",
    "MAJOR_VALUE_SCALE",
    "MINOR_VALUE_SCALE",
    "UINT32_MAX",
    "increment",
    "RangeResult",
    "in_range",
]
