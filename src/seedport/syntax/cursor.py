"""Immutable cursor infrastructure for harness source scanning.

Implements the immutable cursor pattern used by the Go tokenizer.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand, only for diagnostics

Line Ending Support:
    \\n is the line delimiter. CRLF sources work because the \\n is still
    present; CR-only sources report every position on line 1.
"""

from bisect import bisect_right
from dataclasses import dataclass

from seedport.diagnostics import SourceSpan

__all__ = ["Cursor", "LineOffsetCache"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("func", 0)
        >>> cursor.current
        'f'
        >>> cursor.advance().current
        'u'
        >>> cursor.current  # Original unchanged (immutability)
        'f'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """True if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def startswith(self, text: str) -> bool:
        """Check whether the source continues with text at the current position."""
        return self.source.startswith(text, self.pos)

    def skip_while(self, chars: str) -> "Cursor":
        """Advance past every consecutive character contained in chars."""
        c = self
        while not c.is_eof and c.current in chars:
            c = c.advance()
        return c

    def skip_to(self, text: str) -> "Cursor | None":
        """Advance to just past the next occurrence of text.

        Returns:
            New cursor after text, or None if text does not occur again
        """
        index = self.source.find(text, self.pos)
        if index < 0:
            return None
        return Cursor(self.source, index + len(text))

    def compute_line_col(self) -> tuple[int, int]:
        """Compute (line, column) for current position, both 1-indexed.

        Performance:
            O(n) where n = current position. Use LineOffsetCache when many
            positions in the same source need converting.
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def span_to(self, end_pos: int) -> SourceSpan:
        """Build a SourceSpan from the current position to end_pos."""
        line, col = self.compute_line_col()
        return SourceSpan(start=self.pos, end=max(end_pos, self.pos), line=line, column=col)


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups with bisect.

    Example:
        >>> cache = LineOffsetCache("line1\\nline2\\nline3")
        >>> cache.get_line_col(0)
        (1, 1)
        >>> cache.get_line_col(8)
        (2, 3)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get (line, column) for position, both 1-indexed."""
        if pos < 0:
            pos = 0
        elif pos > self._source_len:
            pos = self._source_len

        # index of the last line start <= pos
        line_index = bisect_right(self._offsets, pos) - 1
        return (line_index + 1, pos - self._offsets[line_index] + 1)

    def span(self, start: int, end: int) -> SourceSpan:
        """Build a SourceSpan covering [start, end)."""
        line, col = self.get_line_col(start)
        return SourceSpan(start=start, end=max(start, end), line=line, column=col)
