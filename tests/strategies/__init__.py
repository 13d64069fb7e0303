"""Hypothesis strategies for seedport property-based testing.

Strategies are organized by domain:

- harness: Go harness sources with known signatures, and testcases that
  decode to known values under the go-fuzz-headers consumer

Usage:
    from tests.strategies import harness_sources, encoded_testcases
"""

from .harness import (
    SUPPORTED_TYPE_NAMES,
    UNSUPPORTED_TYPE_NAMES,
    EncodedValue,
    encoded_testcases,
    encoded_value,
    go_identifiers,
    harness_sources,
    type_name_lists,
)

__all__ = [
    "SUPPORTED_TYPE_NAMES",
    "UNSUPPORTED_TYPE_NAMES",
    "EncodedValue",
    "encoded_testcases",
    "encoded_value",
    "go_identifiers",
    "harness_sources",
    "type_name_lists",
]
