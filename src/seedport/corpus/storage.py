"""Corpus storage in Go's testdata layout.

`go test` reads seed corpus entries from testdata/fuzz/<FuzzName>/ in the
package directory; any file name works, and Go itself names generated
entries after the SHA-256 of their contents. Writing is content-addressed
the same way, so re-translating a testcase rewrites the same file.

Python 3.13+. Zero external dependencies.
"""

import hashlib
import logging
from pathlib import Path

from seedport.constants import CORPUS_FILENAME_HEX_LEN

__all__ = ["corpus_directory", "corpus_filename", "write_corpus_entry"]

logger = logging.getLogger(__name__)


def _validate_entry_point(entry_point: str) -> None:
    """Reject names that would escape testdata/fuzz/.

    Raises:
        ValueError: If entry_point is empty or contains path components
    """
    if not entry_point:
        msg = "Entry point name cannot be empty"
        raise ValueError(msg)
    if ".." in entry_point:
        msg = f"Path traversal sequences not allowed in entry point: '{entry_point}'"
        raise ValueError(msg)
    if "/" in entry_point or "\\" in entry_point:
        msg = f"Path separators not allowed in entry point: '{entry_point}'"
        raise ValueError(msg)


def corpus_directory(package_dir: str | Path, entry_point: str) -> Path:
    """Return <package_dir>/testdata/fuzz/<entry_point>.

    Raises:
        ValueError: If entry_point is not a plain name
    """
    _validate_entry_point(entry_point)
    return Path(package_dir) / "testdata" / "fuzz" / entry_point


def corpus_filename(text: str) -> str:
    """Content-derived file name for a corpus entry.

    Example:
        >>> len(corpus_filename("go test fuzz v1\\nint(1)"))
        16
    """
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()
    return digest[:CORPUS_FILENAME_HEX_LEN]


def write_corpus_entry(directory: str | Path, text: str) -> Path:
    """Write text into directory under its content-derived name.

    Creates directory (and parents) if needed. An existing file with the
    same name already holds the same content and is overwritten in place.

    Returns:
        Path of the written file

    Raises:
        OSError: If the directory cannot be created or the file written
    """
    target_dir = Path(directory)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / corpus_filename(text)
    path.write_bytes(text.encode("utf-8"))
    logger.debug("Wrote corpus entry %s (%d bytes)", path, len(text))
    return path
