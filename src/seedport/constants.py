"""Shared constants for seedport.

This module provides centralized configuration constants used across the
syntax, decoding, and corpus packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Corpus format: Fixed strings of Go's native corpus file format
- Harness conventions: Names the signature extractor looks for
- go-fuzz-headers: Constants of the byte consumer being reproduced
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Corpus format
    "CORPUS_FORMAT_MARKER",
    "CORPUS_LINE_SEPARATOR",
    "CORPUS_FILENAME_HEX_LEN",
    # Harness conventions
    "DEFAULT_RECEIVER",
    "DEFAULT_METHOD",
    # go-fuzz-headers
    "DEFAULT_BYTES_LENGTH",
    "MAX_TOTAL_LEN",
    # Input limits
    "MAX_SOURCE_SIZE",
    "MAX_TESTCASE_SIZE",
]

# ============================================================================
# CORPUS FORMAT
# ============================================================================

# First line of every file under testdata/fuzz/<FuzzName>/.
CORPUS_FORMAT_MARKER: str = "go test fuzz v1"

# Go reads one value per line; the last value has no trailing newline.
CORPUS_LINE_SEPARATOR: str = "\n"

# `go test` names cached corpus files after the first 16 hex digits of the
# SHA-256 of their contents.
CORPUS_FILENAME_HEX_LEN: int = 16

# ============================================================================
# HARNESS CONVENTIONS
# ============================================================================

# func FuzzX(f *testing.F) { f.Fuzz(func(t *testing.T, ...) { ... }) }
DEFAULT_RECEIVER: str = "f"
DEFAULT_METHOD: str = "Fuzz"

# ============================================================================
# GO-FUZZ-HEADERS
# ============================================================================

# ConsumeFuzzer.GetBytes() substitutes this length when the encoded length is 0.
DEFAULT_BYTES_LENGTH: int = 30

# ConsumeFuzzer.GetString() refuses to read past this absolute position.
MAX_TOTAL_LEN: int = 2_000_000

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum harness source size in characters (10 MB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# Default maximum testcase size in bytes (libFuzzer's -max_len rarely exceeds 1 MB).
MAX_TESTCASE_SIZE: int = 16 * 1024 * 1024
