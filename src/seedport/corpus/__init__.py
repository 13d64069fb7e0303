"""Corpus rendering package.

The type catalog, Go literal quoting, the corpus encoder and the writer for
Go's testdata/fuzz layout.

Python 3.13+.
"""

from .catalog import TYPE_CATALOG, CatalogEntry, catalog_entry, resolve_kind
from .encoder import CorpusEntry, encode_corpus, encode_corpus_text
from .quoting import format_fixed, go_quote, quote_rune
from .storage import corpus_directory, corpus_filename, write_corpus_entry

__all__ = [
    "TYPE_CATALOG",
    "CatalogEntry",
    "CorpusEntry",
    "catalog_entry",
    "corpus_directory",
    "corpus_filename",
    "encode_corpus",
    "encode_corpus_text",
    "format_fixed",
    "go_quote",
    "quote_rune",
    "resolve_kind",
    "write_corpus_entry",
]
