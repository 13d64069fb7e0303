"""Go literal rendering for corpus values.

go_quote() follows strconv.Quote: every byte that is not part of valid UTF-8
becomes \\xNN, so a quoted []byte or string literal reads back as exactly
the bytes the cursor produced. format_fixed() follows fmt's %f verb,
including its spelling of infinities and NaN.

Python 3.13+. Zero external dependencies.
"""

import math

__all__ = ["format_fixed", "go_quote", "quote_rune"]

# strconv.appendEscapedRune short escapes
_SHORT_ESCAPES: dict[str, str] = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}

# surrogateescape maps undecodable byte 0xNN to U+DCNN
_ESCAPED_BYTE_FIRST = 0xDC80
_ESCAPED_BYTE_LAST = 0xDCFF
_SURROGATE_FIRST = 0xD800
_SURROGATE_LAST = 0xDFFF


def _escape_char(ch: str, quote: str) -> str:
    code = ord(ch)
    if _ESCAPED_BYTE_FIRST <= code <= _ESCAPED_BYTE_LAST:
        return f"\\x{code - 0xDC00:02x}"
    if ch in (quote, "\\"):
        return "\\" + ch
    if ch.isprintable():
        return ch
    if ch in _SHORT_ESCAPES:
        return _SHORT_ESCAPES[ch]
    if code < 0x20 or code == 0x7F:
        return f"\\x{code:02x}"
    if _SURROGATE_FIRST <= code <= _SURROGATE_LAST:
        # Not a valid rune; Go substitutes the replacement character
        return "\\ufffd"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def go_quote(value: bytes | str, quote: str = '"') -> str:
    """Quote value as a Go interpreted string literal.

    Args:
        value: Raw bytes, or text whose undecodable bytes are carried as
            surrogateescape code points
        quote: Delimiter; '"' for strings, "'" for runes

    Returns:
        Quoted literal including delimiters

    Example:
        >>> go_quote(b"hi\\n\\xff")
        '"hi\\\\n\\\\xff"'
        >>> go_quote("tab\\there")
        '"tab\\\\there"'
    """
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="surrogateescape")
    return quote + "".join(_escape_char(ch, quote) for ch in value) + quote


def quote_rune(ch: str) -> str:
    """Quote a single code point as a Go rune literal (strconv.QuoteRune).

    Raises:
        ValueError: If ch is not exactly one code point
    """
    if len(ch) != 1:
        msg = f"Rune literal needs exactly one code point, got {len(ch)}"
        raise ValueError(msg)
    return go_quote(ch, "'")


def format_fixed(value: float) -> str:
    """Format a float like Go's %f verb.

    Example:
        >>> format_fixed(1.5)
        '1.500000'
        >>> format_fixed(float("-inf"))
        '-Inf'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return f"{value:f}"
