"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Structural errors (harness source cannot yield a signature)
        2000-2999: Decode errors (testcase cannot be encoded for a signature)
    """

    # Structural errors (1000-1999)
    ENTRY_POINT_NOT_FOUND = 1001
    FUZZ_CALL_NOT_FOUND = 1002
    UNSUPPORTED_TYPE_SYNTAX = 1003
    SOURCE_SYNTAX = 1004
    MISSING_CONTEXT_PARAM = 1005

    # Decode errors (2000-2999)
    INPUT_EXHAUSTED = 2001
    UNSUPPORTED_PARAM_TYPE = 2002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Harness source location (structural errors only)
        hint: Suggestion for fixing the error
        entry_point: Fuzz entry point being translated
        param_index: 0-based index of the offending parameter (after the
            dropped context parameter)
        param_type: Go spelling of the offending parameter type
        offset: Testcase byte offset where decoding stopped
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    entry_point: str | None = None
    param_index: int | None = None
    param_type: str | None = None
    offset: int | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Example output:
            error[INPUT_EXHAUSTED]: Testcase exhausted while decoding parameter 2 (bool)
              = entry point: FuzzParse
              = parameter: 2 (bool)
              = offset: 14
              = help: The testcase is shorter than the harness signature requires

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
