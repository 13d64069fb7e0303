"""Enumerations for seedport type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a GoKind renders as its Go spelling.

Python 3.13+.
"""

from enum import StrEnum


class GoKind(StrEnum):
    """Closed set of fuzz parameter types the corpus encoder can produce.

    StrEnum provides automatic string conversion: str(GoKind.UINT16) == "uint16"
    """

    BYTES = "[]byte"
    """Byte slice: []byte or []uint8"""

    STRING = "string"

    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"

    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"

    RUNE = "rune"
    """Single Unicode code point (Go alias of int32, decoded separately)"""

    FLOAT32 = "float32"
    FLOAT64 = "float64"

    BOOL = "bool"


__all__ = [
    "GoKind",
]
