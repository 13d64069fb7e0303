"""Testcase decoding package.

ByteSource is the capability the corpus encoder consumes; ConsumerCursor is
the go-fuzz-headers implementation used by default.

Python 3.13+.
"""

from .consumer import ConsumerCursor
from .source import ByteSource, ByteSourceFactory

__all__ = [
    "ByteSource",
    "ByteSourceFactory",
    "ConsumerCursor",
]
