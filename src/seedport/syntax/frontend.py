"""Harness front-ends: structural scanning of fuzz harness source.

The signature extractor talks to a front-end through three capabilities:
locate a named declaration, find receiver.method(func literal) calls in its
body, and read the literal's parameter types. GoHarnessFrontend implements
them for Go source on top of the tokenizer; other harness syntaxes plug in by
implementing HarnessFrontend.

Architecture:
    The Go front-end tokenizes once, then pairs every opening bracket with
    its closing bracket. All searches afterwards are index arithmetic over
    the token tuple: skipping a parenthesized list, a type parameter list
    or a block is a single lookup. Declaration and call-site handles are
    token indices.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from seedport.diagnostics import ErrorTemplate, SourceSpan, StructuralError
from seedport.syntax.cursor import LineOffsetCache
from seedport.syntax.lexer import tokenize
from seedport.syntax.tokens import Token, TokenKind
from seedport.syntax.types import (
    CallSite,
    Declaration,
    NamedType,
    OpaqueType,
    Parameter,
    SequenceType,
    TypeSyntax,
)

__all__ = ["GoHarnessFrontend", "HarnessFrontend"]

logger = logging.getLogger(__name__)

_OPENERS: dict[str, str] = {"(": ")", "[": "]", "{": "}"}
_CLOSERS: frozenset[str] = frozenset(_OPENERS.values())

# Top-level keywords that end a declaration without a body.
_DECL_KEYWORDS: frozenset[str] = frozenset({"const", "import", "package", "type", "var"})


@runtime_checkable
class HarnessFrontend(Protocol):
    """Capabilities the signature extractor needs from a harness scanner."""

    def find_declarations(self, name: str) -> Sequence[Declaration]:
        """Return every function declaration called name, in source order."""
        ...

    def find_method_calls(
        self, declaration: Declaration, receiver: str, method: str
    ) -> Sequence[CallSite]:
        """Return receiver.method(func literal) calls inside the declaration body."""
        ...

    def literal_parameters(self, call: CallSite) -> tuple[Parameter, ...]:
        """Return the function literal's parameters, one per declared name."""
        ...


class GoHarnessFrontend:
    """Go implementation of HarnessFrontend.

    Example:
        >>> frontend = GoHarnessFrontend('''
        ... func FuzzX(f *testing.F) {
        ...     f.Fuzz(func(t *testing.T, data []byte, n int) {})
        ... }''')
        >>> decl = frontend.find_declarations("FuzzX")[0]
        >>> call = frontend.find_method_calls(decl, "f", "Fuzz")[0]
        >>> [str(p.type) for p in frontend.literal_parameters(call)]
        ['*testing.T', '[]byte', 'int']
    """

    __slots__ = ("_depths", "_lines", "_pairs", "_source", "_tokens")

    def __init__(self, source: str) -> None:
        """Tokenize source and match brackets.

        Raises:
            StructuralError: If the source cannot be tokenized or brackets
                are unbalanced
        """
        self._source = source
        self._lines = LineOffsetCache(source)
        self._tokens = tokenize(source)
        self._pairs, self._depths = self._match_brackets()

    # ===== Bracket structure =====

    def _match_brackets(self) -> tuple[dict[int, int], tuple[int, ...]]:
        pairs: dict[int, int] = {}
        depths: list[int] = []
        stack: list[int] = []

        for index, token in enumerate(self._tokens):
            if token.kind is TokenKind.OP and token.text in _CLOSERS:
                if not stack or _OPENERS[self._tokens[stack[-1]].text] != token.text:
                    raise self._syntax_error(index, f"Unexpected '{token.text}'")
                opener = stack.pop()
                pairs[opener] = index
                pairs[index] = opener
            depths.append(len(stack))
            if token.kind is TokenKind.OP and token.text in _OPENERS:
                stack.append(index)

        if stack:
            opener = self._tokens[stack[-1]]
            raise self._syntax_error(stack[-1], f"Unclosed '{opener.text}'")
        return pairs, tuple(depths)

    def _syntax_error(self, index: int, message: str) -> StructuralError:
        token = self._tokens[index]
        span = self._lines.span(token.start, token.end)
        return StructuralError(ErrorTemplate.source_syntax(message, span))

    def _token(self, index: int) -> Token | None:
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None

    def _is_op(self, index: int, text: str) -> bool:
        token = self._token(index)
        return token is not None and token.is_op(text)

    def _skip_group(self, index: int) -> int:
        """Index just past the bracket group opened at index."""
        return self._pairs[index] + 1

    def _span(self, first: int, last: int | None = None) -> SourceSpan:
        last = first if last is None else last
        return self._lines.span(self._tokens[first].start, self._tokens[last].end)

    # ===== Declarations =====

    def _declaration_name(self, index: int) -> int | None:
        """Index of the declared name if a function declaration starts at index.

        Matches 'func Name' and 'func (recv T) Name' followed by '(' or a
        type parameter list.
        """
        token = self._token(index)
        if token is None or not token.is_keyword("func") or self._depths[index] != 0:
            return None
        name_index = index + 1
        if self._is_op(name_index, "("):
            name_index = self._skip_group(name_index)
        name = self._token(name_index)
        if name is None or not name.is_ident():
            return None
        if not (self._is_op(name_index + 1, "(") or self._is_op(name_index + 1, "[")):
            return None
        return name_index

    def _find_body(self, index: int) -> int | None:
        """Index of the '{' opening the body of a signature that ends before index.

        Walks over result types, skipping bracket groups and struct/interface
        type literals, and stops at the next top-level declaration.
        """
        while (token := self._token(index)) is not None:
            if token.kind is TokenKind.OP and token.text in ("(", "["):
                index = self._skip_group(index)
                continue
            if token.is_op("{"):
                previous = self._token(index - 1)
                if previous is not None and (
                    previous.is_keyword("struct") or previous.is_keyword("interface")
                ):
                    index = self._skip_group(index)
                    continue
                return index
            if token.kind is TokenKind.KEYWORD and token.text in _DECL_KEYWORDS:
                return None
            if self._declaration_name(index) is not None:
                return None
            if token.kind is TokenKind.OP and token.text in _CLOSERS:
                return None
            index += 1
        return None

    def find_declarations(self, name: str) -> Sequence[Declaration]:
        declarations: list[Declaration] = []
        for index in range(len(self._tokens)):
            name_index = self._declaration_name(index)
            if name_index is None or self._tokens[name_index].text != name:
                continue
            params_open = name_index + 1
            if self._is_op(params_open, "["):
                params_open = self._skip_group(params_open)
            if not self._is_op(params_open, "("):
                continue
            body_open = self._find_body(self._skip_group(params_open))
            if body_open is None:
                logger.debug("Declaration of %s at token %d has no body", name, name_index)
                continue
            declarations.append(
                Declaration(
                    name=name,
                    span=self._span(name_index),
                    body_start=body_open,
                    body_end=self._pairs[body_open],
                )
            )
        return declarations

    # ===== Calls =====

    def _literal_params(self, argument: int) -> tuple[int, int] | None:
        """(open, close) of the parameter list if a function literal starts at argument."""
        token = self._token(argument)
        if token is None or not token.is_keyword("func") or not self._is_op(argument + 1, "("):
            return None
        return argument + 1, self._pairs[argument + 1]

    def find_method_calls(
        self, declaration: Declaration, receiver: str, method: str
    ) -> Sequence[CallSite]:
        calls: list[CallSite] = []
        for index in range(declaration.body_start + 1, declaration.body_end):
            token = self._tokens[index]
            if not token.is_ident(receiver) or self._is_op(index - 1, "."):
                continue
            method_token = self._token(index + 2)
            if not (
                self._is_op(index + 1, ".")
                and method_token is not None
                and method_token.is_ident(method)
                and self._is_op(index + 3, "(")
            ):
                continue

            call_open = index + 3
            call_close = self._pairs[call_open]
            params = self._literal_params(call_open + 1)
            if params is None:
                continue
            body_open = self._find_body(params[1] + 1)
            if body_open is None:
                continue
            after_literal = self._pairs[body_open] + 1
            if self._is_op(after_literal, ","):
                after_literal += 1
            if after_literal != call_close:
                continue

            calls.append(
                CallSite(
                    receiver=receiver,
                    method=method,
                    span=self._span(index, index + 2),
                    params_start=params[0],
                    params_end=params[1],
                )
            )
        return calls

    # ===== Parameters =====

    def _split_groups(self, start: int, end: int) -> list[tuple[int, int]]:
        """Split the tokens in (start, end) at top-level commas into [first, last) ranges."""
        groups: list[tuple[int, int]] = []
        first = index = start + 1
        while index < end:
            token = self._tokens[index]
            if token.kind is TokenKind.OP and token.text in _OPENERS:
                index = self._skip_group(index)
                continue
            if token.is_op(","):
                groups.append((first, index))
                first = index + 1
            index += 1
        if first < end:
            groups.append((first, end))
        return groups

    def _is_named_group(self, first: int, last: int) -> bool:
        """Whether tokens [first, last) read as 'name Type' rather than a bare type."""
        if last - first < 2 or not self._tokens[first].is_ident():
            return False
        second = self._tokens[first + 1]
        if second.is_op("."):
            return False
        if second.is_op("["):
            # T[int] is a generic instantiation, a [4]byte a named array
            return self._skip_group(first + 1) < last
        return True

    def _classify(self, first: int, last: int) -> TypeSyntax:
        tokens = self._tokens[first:last]
        if len(tokens) == 1 and tokens[0].is_ident():
            return NamedType(tokens[0].text)
        if (
            len(tokens) == 3
            and tokens[0].is_op("[")
            and tokens[1].is_op("]")
            and tokens[2].is_ident()
        ):
            return SequenceType(tokens[2].text)
        return OpaqueType(self._source[tokens[0].start : tokens[-1].end])

    def literal_parameters(self, call: CallSite) -> tuple[Parameter, ...]:
        groups = self._split_groups(call.params_start, call.params_end)
        for first, last in groups:
            if first == last:
                raise self._syntax_error(first, "Empty parameter in function literal")

        if not any(self._is_named_group(first, last) for first, last in groups):
            return tuple(
                Parameter(name=None, type=self._classify(first, last), span=self._span(first, last - 1))
                for first, last in groups
            )

        parameters: list[Parameter] = []
        pending: list[str] = []
        for first, last in groups:
            if last - first == 1 and self._tokens[first].is_ident():
                pending.append(self._tokens[first].text)
                continue
            if not self._is_named_group(first, last):
                raise self._syntax_error(first, "Mixed named and unnamed parameters")
            type_syntax = self._classify(first + 1, last)
            span = self._span(first + 1, last - 1)
            for name in (*pending, self._tokens[first].text):
                parameters.append(Parameter(name=name, type=type_syntax, span=span))
            pending.clear()

        if pending:
            raise self._syntax_error(call.params_end, f"Missing type for parameter '{pending[-1]}'")
        return tuple(parameters)
