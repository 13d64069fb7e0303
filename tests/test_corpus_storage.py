"""Tests for corpus.storage: testdata/fuzz layout and content naming."""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest

from seedport.corpus import corpus_directory, corpus_filename, write_corpus_entry

ENTRY_TEXT = 'go test fuzz v1\n[]byte("abc")\nint(5)'


class TestCorpusDirectory:
    """corpus_directory builds <pkg>/testdata/fuzz/<entry>."""

    def test_layout(self, tmp_path: Path) -> None:
        """The directory follows go test's convention."""
        assert corpus_directory(tmp_path, "FuzzParse") == tmp_path / "testdata" / "fuzz" / "FuzzParse"

    def test_accepts_str(self) -> None:
        """String package directories are accepted."""
        assert corpus_directory("pkg", "FuzzX") == Path("pkg/testdata/fuzz/FuzzX")

    @pytest.mark.parametrize(
        ("entry_point", "message"),
        [
            ("", "cannot be empty"),
            ("..", "traversal"),
            ("a/b", "separators"),
            ("a\\b", "separators"),
        ],
    )
    def test_rejects_path_components(self, entry_point: str, message: str) -> None:
        """Entry points cannot escape the corpus root."""
        with pytest.raises(ValueError, match=message):
            corpus_directory("pkg", entry_point)


class TestCorpusFilename:
    """corpus_filename hashes content."""

    def test_sha256_prefix(self) -> None:
        """The name is the first 16 hex digits of SHA-256."""
        expected = hashlib.sha256(ENTRY_TEXT.encode()).hexdigest()[:16]

        assert corpus_filename(ENTRY_TEXT) == expected

    def test_distinct_content_distinct_names(self) -> None:
        """Different entries get different names."""
        assert corpus_filename("go test fuzz v1\nint(1)") != corpus_filename("go test fuzz v1\nint(2)")


class TestWriteCorpusEntry:
    """write_corpus_entry stores text under its content name."""

    def test_creates_directory(self, tmp_path: Path) -> None:
        """Missing parents are created."""
        directory = tmp_path / "testdata" / "fuzz" / "FuzzX"

        path = write_corpus_entry(directory, ENTRY_TEXT)

        assert path == directory / corpus_filename(ENTRY_TEXT)
        assert path.read_bytes() == ENTRY_TEXT.encode("utf-8")

    def test_idempotent(self, tmp_path: Path) -> None:
        """Writing the same entry twice leaves one file."""
        first = write_corpus_entry(tmp_path, ENTRY_TEXT)
        second = write_corpus_entry(tmp_path, ENTRY_TEXT)

        assert first == second
        assert list(tmp_path.iterdir()) == [first]

    def test_non_ascii_content(self, tmp_path: Path) -> None:
        """Text is stored as UTF-8."""
        text = "go test fuzz v1\nstring(\"é\")"

        assert write_corpus_entry(tmp_path, text).read_text(encoding="utf-8") == text
