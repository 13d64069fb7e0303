"""seedport - translate libFuzzer seeds into Go native fuzzing corpus entries.

Reads the f.Fuzz(func(t *testing.T, ...)) signature of a Go fuzz harness and
decodes libFuzzer testcases the way go-fuzz-headers would, rendering one
Go literal per parameter in the `go test fuzz v1` corpus format.

Public API:
    SeedTranslator - Configurable translator (signature, translate, translate_many)
    convert_libfuzzer_seed - One-shot translation with default settings
    extract_signature - Harness source -> HarnessSignature
    encode_corpus - Parameter types + testcase -> CorpusEntry
    ConsumerCursor - go-fuzz-headers byte consumer

Exceptions:
    SeedPortError - Base exception class
    StructuralError - Harness yields no signature
    DecodeError - Testcase cannot be encoded

Submodules:
    seedport.syntax - Go tokenizer, harness front-end, signature types
    seedport.decoding - ByteSource protocol and ConsumerCursor
    seedport.corpus - Type catalog, Go quoting, encoder, corpus storage
    seedport.diagnostics - Error codes, templates and formatting
"""

from .constants import CORPUS_FORMAT_MARKER
from .corpus import CorpusEntry, encode_corpus, encode_corpus_text
from .decoding import ByteSource, ConsumerCursor
from .diagnostics import DecodeError, SeedPortError, StructuralError
from .enums import GoKind
from .syntax import HarnessSignature, NamedType, SequenceType, extract_signature
from .translator import SeedTranslator, TranslationResult, convert_libfuzzer_seed

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("seedport")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# Corpus format produced
__corpus_format__ = CORPUS_FORMAT_MARKER

__all__ = [
    "ByteSource",
    "ConsumerCursor",
    "CorpusEntry",
    "DecodeError",
    "GoKind",
    "HarnessSignature",
    "NamedType",
    "SeedPortError",
    "SeedTranslator",
    "SequenceType",
    "StructuralError",
    "TranslationResult",
    "__corpus_format__",
    "__version__",
    "convert_libfuzzer_seed",
    "encode_corpus",
    "encode_corpus_text",
    "extract_signature",
]
