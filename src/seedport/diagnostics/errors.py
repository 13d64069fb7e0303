"""seedport exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Callers branch on the exception class to tell a harness that cannot be
analysed (StructuralError) from a testcase that cannot be encoded
(DecodeError).

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class SeedPortError(Exception):
    """Base exception for all seedport errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize SeedPortError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class StructuralError(SeedPortError):
    """The harness source does not yield a parameter signature.

    Raised when the entry point or its f.Fuzz call cannot be found, when the
    source is malformed, or when a retained parameter uses type syntax other
    than a bare name or a single-level slice of a name.
    No partial signature is ever returned.
    """


class DecodeError(SeedPortError):
    """The testcase cannot be encoded for a signature.

    Raised when the byte cursor runs out of input before every parameter
    has a value, or when a parameter type is outside the type catalog.
    No partial corpus entry is ever returned.
    """
