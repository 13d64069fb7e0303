"""Harness source scanning package.

Provides the Go tokenizer, the structural front-end and the signature
extractor. Separate from decoding and corpus rendering so that other harness
syntaxes can plug in through HarnessFrontend.

Python 3.13+.
"""

from .cursor import Cursor, LineOffsetCache
from .extractor import decode_source, extract_signature
from .frontend import GoHarnessFrontend, HarnessFrontend
from .lexer import tokenize
from .tokens import Token, TokenKind
from .types import (
    CallSite,
    Declaration,
    HarnessSignature,
    NamedType,
    OpaqueType,
    Parameter,
    ParamType,
    SequenceType,
    TypeSyntax,
)

__all__ = [
    "CallSite",
    "Cursor",
    "Declaration",
    "GoHarnessFrontend",
    "HarnessFrontend",
    "HarnessSignature",
    "LineOffsetCache",
    "NamedType",
    "OpaqueType",
    "ParamType",
    "Parameter",
    "SequenceType",
    "Token",
    "TokenKind",
    "TypeSyntax",
    "decode_source",
    "extract_signature",
    "tokenize",
]
