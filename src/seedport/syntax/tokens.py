"""Token definitions for the Go harness tokenizer.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

__all__ = ["GO_KEYWORDS", "Token", "TokenKind"]


class TokenKind(StrEnum):
    """Lexical category of a Go token."""

    IDENT = "ident"
    KEYWORD = "keyword"
    NUMBER = "number"
    STRING = "string"
    CHAR = "char"
    OP = "op"
    """Operators and punctuation, one character each except '...'"""


# Go language reference, "Keywords"
GO_KEYWORDS: frozenset[str] = frozenset({
    "break", "case", "chan", "const", "continue",
    "default", "defer", "else", "fallthrough", "for",
    "func", "go", "goto", "if", "import",
    "interface", "map", "package", "range", "return",
    "select", "struct", "switch", "type", "var",
})  # fmt: skip


@dataclass(frozen=True, slots=True)
class Token:
    """A single token with its character offsets in the harness source.

    Attributes:
        kind: Lexical category
        text: Exact source text of the token
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)
    """

    kind: TokenKind
    text: str
    start: int
    end: int

    def is_op(self, text: str) -> bool:
        """Check for a specific operator or punctuation token."""
        return self.kind is TokenKind.OP and self.text == text

    def is_keyword(self, text: str) -> bool:
        """Check for a specific keyword token."""
        return self.kind is TokenKind.KEYWORD and self.text == text

    def is_ident(self, text: str | None = None) -> bool:
        """Check for an identifier, optionally with a specific name."""
        return self.kind is TokenKind.IDENT and (text is None or self.text == text)
