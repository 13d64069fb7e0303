"""ByteSource protocol: typed sequential extraction over a testcase buffer.

The corpus encoder never interprets testcase bytes itself. It asks a
ByteSource for one typed value per fuzz parameter and renders whatever comes
back, so the byte-consumption rules live entirely behind this protocol.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

__all__ = ["ByteSource", "ByteSourceFactory"]


@runtime_checkable
class ByteSource(Protocol):
    """Protocol for sequential decoders over a raw testcase buffer.

    Every operation consumes bytes from the unconsumed remainder of the
    buffer and returns a value, or raises EOFError when the remainder cannot
    satisfy it. Consumed bytes are never revisited.

    This is a Protocol (structural typing) rather than ABC so that
    alternative consumer versions can be substituted without inheriting
    from anything in this package.
    """

    def get_byte(self) -> int:
        """Return one byte as 0..255."""
        ...

    def get_bytes(self) -> bytes:
        """Return a length-prefixed byte sequence."""
        ...

    def get_string(self) -> str:
        """Return a length-prefixed text value.

        Bytes that are not valid UTF-8 are preserved as lone surrogates
        (surrogateescape) so the caller can recover the exact bytes.
        """
        ...

    def get_int(self) -> int:
        """Return the shared value for int, every signed width, uint and uint8."""
        ...

    def get_uint16(self) -> int:
        """Return an unsigned 16-bit value."""
        ...

    def get_uint32(self) -> int:
        """Return an unsigned 32-bit value."""
        ...

    def get_uint64(self) -> int:
        """Return an unsigned 64-bit value."""
        ...

    def get_rune(self) -> str:
        """Return a single Unicode code point."""
        ...

    def get_float32(self) -> float:
        """Return an IEEE 754 single-precision value."""
        ...

    def get_float64(self) -> float:
        """Return an IEEE 754 double-precision value."""
        ...

    def get_bool(self) -> bool:
        """Return a boolean."""
        ...


type ByteSourceFactory = Callable[[bytes], ByteSource]
"""Builds a fresh ByteSource over a testcase buffer."""
