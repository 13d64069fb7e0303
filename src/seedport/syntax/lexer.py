"""Go tokenizer for harness source scanning.

Produces the token stream the structural scanner walks. Only the lexical
rules that affect bracket structure are modelled exactly: comments and
string, raw string and rune literals are consumed whole so that brackets
inside them never count. Operators other than '...' are emitted one
character at a time since no multi-character operator matters to the
scanner.

Python 3.13+. Zero external dependencies.
"""

import logging

from seedport.diagnostics import ErrorTemplate, StructuralError
from seedport.syntax.cursor import Cursor
from seedport.syntax.tokens import GO_KEYWORDS, Token, TokenKind

__all__ = ["tokenize"]

logger = logging.getLogger(__name__)

_WHITESPACE: str = " \t\r\n\ufeff"
_DIGITS: tuple[str, ...] = tuple("0123456789")


def _is_ident_start(ch: str) -> bool:
    return ch == "_" or ch.isalpha()


def _is_ident_part(ch: str) -> bool:
    return ch == "_" or ch.isalnum()


def _fail(cursor: Cursor, message: str) -> StructuralError:
    return StructuralError(ErrorTemplate.source_syntax(message, cursor.span_to(cursor.pos + 1)))


def _scan_quoted(cursor: Cursor, quote: str, what: str) -> Cursor:
    """Consume an interpreted string or rune literal starting at its opening quote."""
    start = cursor
    cursor = cursor.advance()
    while True:
        if cursor.is_eof or cursor.current == "\n":
            raise _fail(start, f"Unterminated {what} literal")
        ch = cursor.current
        if ch == "\\":
            cursor = cursor.advance(2)
            continue
        cursor = cursor.advance()
        if ch == quote:
            return cursor


def _scan_number(cursor: Cursor) -> Cursor:
    """Consume a numeric literal (decimal, hex, octal, binary, float, imaginary)."""
    is_hex = cursor.startswith("0x") or cursor.startswith("0X")
    exponents = "pP" if is_hex else "eEpP"
    while not cursor.is_eof:
        ch = cursor.current
        if ch in exponents and cursor.peek(1) in ("+", "-"):
            cursor = cursor.advance(2)
        elif _is_ident_part(ch) or ch == ".":
            cursor = cursor.advance()
        else:
            break
    return cursor


def tokenize(source: str) -> tuple[Token, ...]:
    """Split Go source into tokens, dropping whitespace and comments.

    Args:
        source: Go source text

    Returns:
        Tuple of tokens in source order

    Raises:
        StructuralError: On unterminated comments or literals

    Example:
        >>> [t.text for t in tokenize("f.Fuzz(func(t *testing.T) {})")]
        ['f', '.', 'Fuzz', '(', 'func', '(', 't', '*', 'testing', '.', 'T', ')', '{', '}', ')']
    """
    tokens: list[Token] = []
    cursor = Cursor(source, 0)

    while True:
        cursor = cursor.skip_while(_WHITESPACE)
        if cursor.is_eof:
            break

        start = cursor
        ch = cursor.current

        if cursor.startswith("//"):
            end = cursor.skip_to("\n")
            cursor = end if end is not None else Cursor(source, len(source))
            continue

        if cursor.startswith("/*"):
            end = cursor.advance(2).skip_to("*/")
            if end is None:
                raise _fail(start, "Unterminated block comment")
            cursor = end
            continue

        if _is_ident_start(ch):
            cursor = cursor.advance()
            while not cursor.is_eof and _is_ident_part(cursor.current):
                cursor = cursor.advance()
            text = start.slice_to(cursor.pos)
            kind = TokenKind.KEYWORD if text in GO_KEYWORDS else TokenKind.IDENT
        elif ch in _DIGITS or (ch == "." and cursor.peek(1) in _DIGITS):
            cursor = _scan_number(cursor)
            kind = TokenKind.NUMBER
        elif ch == '"':
            cursor = _scan_quoted(cursor, '"', "string")
            kind = TokenKind.STRING
        elif ch == "'":
            cursor = _scan_quoted(cursor, "'", "rune")
            kind = TokenKind.CHAR
        elif ch == "`":
            end = cursor.advance().skip_to("`")
            if end is None:
                raise _fail(start, "Unterminated raw string literal")
            cursor = end
            kind = TokenKind.STRING
        elif cursor.startswith("..."):
            cursor = cursor.advance(3)
            kind = TokenKind.OP
        else:
            cursor = cursor.advance()
            kind = TokenKind.OP

        tokens.append(Token(kind, start.slice_to(cursor.pos), start.pos, cursor.pos))

    logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))
    return tuple(tokens)
