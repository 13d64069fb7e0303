"""ConsumerCursor: go-fuzz-headers ConsumeFuzzer decoding rules.

Reproduces how harnesses built on go-fuzz-headers carve a libFuzzer testcase
into typed values, so that the same bytes decode to the same values here.

Byte layout:
    int, byte      1 byte
    bool           1 byte, true when odd
    uintN, floatN  N/8 bytes, then 1 bool byte: true = little-endian
    []byte         uint32 length (0 means 30), clamped modulo the remainder
    string         uint32 length, must fit in the remainder exactly
    rune           first code point of a string

Python 3.13+. Zero external dependencies.
"""

import logging
import struct

from seedport.constants import DEFAULT_BYTES_LENGTH, MAX_TOTAL_LEN

__all__ = ["ConsumerCursor"]

logger = logging.getLogger(__name__)

# struct format characters by width in bytes
_UNSIGNED_FORMATS: dict[int, str] = {2: "H", 4: "I", 8: "Q"}
_FLOAT_FORMATS: dict[int, str] = {4: "f", 8: "d"}


class ConsumerCursor:
    """Position-tracking ByteSource over an immutable testcase buffer.

    The position only moves forward. A failed operation may leave the
    position advanced past the bytes it already consumed, exactly like the
    Go consumer; callers discard the cursor after any EOFError.

    Example:
        >>> cursor = ConsumerCursor(bytes([7, 0x01, 0x00, 1]))
        >>> cursor.get_int()
        7
        >>> cursor.get_uint16()  # 01 00, then odd byte: little-endian
        1
        >>> cursor.remaining
        0
    """

    __slots__ = ("_data", "_position")

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._position = 0

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        return self._position

    @property
    def remaining(self) -> int:
        """Number of bytes not yet consumed."""
        return len(self._data) - self._position

    def __repr__(self) -> str:
        return f"ConsumerCursor(position={self._position}, size={len(self._data)})"

    # ===== Primitive reads =====

    def _take(self, count: int, what: str) -> bytes:
        if count > self.remaining:
            msg = f"Not enough bytes to create {what}: need {count}, have {self.remaining}"
            raise EOFError(msg)
        start = self._position
        self._position += count
        return self._data[start : self._position]

    def _unpack(self, width: int, code: str, what: str) -> int | float:
        raw = self._take(width, what)
        order = "<" if self.get_bool() else ">"
        (value,) = struct.unpack(order + code, raw)
        return value

    def _string_bytes(self) -> bytes:
        if self.remaining <= 0:
            msg = "Not enough bytes to create string"
            raise EOFError(msg)
        length = self.get_uint32()
        if self._position > MAX_TOTAL_LEN:
            msg = f"Created too large a string: position {self._position} exceeds {MAX_TOTAL_LEN}"
            raise EOFError(msg)
        if self.remaining <= 0 or length > self.remaining:
            msg = f"Not enough bytes to create string of length {length}"
            raise EOFError(msg)
        return self._take(length, "string")

    # ===== ByteSource operations =====

    def get_byte(self) -> int:
        return self._take(1, "byte")[0]

    def get_int(self) -> int:
        return self._take(1, "int")[0]

    def get_bool(self) -> bool:
        return self._take(1, "bool")[0] % 2 == 1

    def get_uint16(self) -> int:
        return int(self._unpack(2, _UNSIGNED_FORMATS[2], "uint16"))

    def get_uint32(self) -> int:
        return int(self._unpack(4, _UNSIGNED_FORMATS[4], "uint32"))

    def get_uint64(self) -> int:
        return int(self._unpack(8, _UNSIGNED_FORMATS[8], "uint64"))

    def get_float32(self) -> float:
        return float(self._unpack(4, _FLOAT_FORMATS[4], "float32"))

    def get_float64(self) -> float:
        return float(self._unpack(8, _FLOAT_FORMATS[8], "float64"))

    def get_bytes(self) -> bytes:
        length = self.get_uint32()
        if length == 0:
            length = DEFAULT_BYTES_LENGTH
        left = self.remaining
        if left <= 0:
            msg = "Not enough bytes to create byte array"
            raise EOFError(msg)
        if length != left:
            length %= left
        logger.debug("get_bytes: %d of %d remaining bytes", length, left)
        return self._take(length, "byte array")

    def get_string(self) -> str:
        return self._string_bytes().decode("utf-8", errors="surrogateescape")

    def get_rune(self) -> str:
        # Go's []rune(s) turns each invalid byte into U+FFFD
        text = self._string_bytes().decode("utf-8", errors="replace")
        if not text:
            msg = "Not enough bytes to create rune: empty string"
            raise EOFError(msg)
        return text[0]
