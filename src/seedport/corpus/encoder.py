"""Corpus encoder: testcase bytes + signature -> Go corpus entry.

Resolves every parameter type against the catalog before the buffer is
touched, then decodes and renders one value per parameter through a single
cursor. Any failure aborts the whole entry; nothing partial is returned.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from seedport.constants import CORPUS_FORMAT_MARKER, CORPUS_LINE_SEPARATOR
from seedport.decoding import ByteSourceFactory, ConsumerCursor
from seedport.diagnostics import DecodeError, ErrorTemplate
from seedport.syntax.types import ParamType

from .catalog import catalog_entry, resolve_kind

__all__ = ["CorpusEntry", "encode_corpus", "encode_corpus_text"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CorpusEntry:
    """One Go native fuzzing corpus entry.

    Attributes:
        lines: Rendered literals, one per fuzz parameter, in signature order
        marker: Format line preceding the literals
    """

    lines: tuple[str, ...]
    marker: str = CORPUS_FORMAT_MARKER

    def to_text(self) -> str:
        """Join marker and literals with newlines, without a trailing newline.

        Example:
            >>> CorpusEntry(("int(7)", "bool(true)")).to_text()
            'go test fuzz v1\\nint(7)\\nbool(true)'
        """
        return CORPUS_LINE_SEPARATOR.join((self.marker, *self.lines))

    def __len__(self) -> int:
        return len(self.lines)


def encode_corpus(
    params: Sequence[ParamType],
    testcase: bytes,
    *,
    cursor_factory: ByteSourceFactory = ConsumerCursor,
    entry_point: str | None = None,
) -> CorpusEntry:
    """Decode testcase into one literal per parameter.

    Args:
        params: Fuzz parameter types in signature order
        testcase: Raw testcase buffer
        cursor_factory: Builds the ByteSource that decodes the buffer
        entry_point: Name of the fuzz entry point, for diagnostics

    Returns:
        CorpusEntry with len(params) literals

    Raises:
        DecodeError: A type is outside the catalog (raised before any byte
            is consumed), or the cursor ran out of input

    Example:
        >>> from seedport.syntax.types import NamedType, SequenceType
        >>> entry = encode_corpus([SequenceType("byte"), NamedType("bool")], b"\\x02\\x00\\x00\\x00\\x01hi\\x01")
        >>> entry.lines
        ('[]byte("hi")', 'bool(true)')
    """
    kinds = [resolve_kind(param, index, entry_point) for index, param in enumerate(params)]
    entries = [catalog_entry(kind, index, entry_point) for index, kind in enumerate(kinds)]

    cursor = cursor_factory(bytes(testcase))
    lines: list[str] = []
    for index, (param, entry) in enumerate(zip(params, entries, strict=True)):
        try:
            lines.append(entry.encode(cursor))
        except EOFError as e:
            offset = getattr(cursor, "position", None)
            logger.debug("Cursor exhausted at parameter %d (%s): %s", index, param.spelling, e)
            raise DecodeError(
                ErrorTemplate.input_exhausted(index, param.spelling, offset, entry_point)
            ) from e

    logger.debug("Encoded %d parameters from %d testcase bytes", len(lines), len(testcase))
    return CorpusEntry(lines=tuple(lines))


def encode_corpus_text(
    params: Sequence[ParamType],
    testcase: bytes,
    *,
    cursor_factory: ByteSourceFactory = ConsumerCursor,
    entry_point: str | None = None,
) -> str:
    """Encode testcase and return the corpus file text. See encode_corpus()."""
    return encode_corpus(
        params, testcase, cursor_factory=cursor_factory, entry_point=entry_point
    ).to_text()
