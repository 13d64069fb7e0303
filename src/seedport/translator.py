"""Seed translation: harness source + libFuzzer testcase -> Go corpus text.

SeedTranslator ties signature extraction to corpus encoding. It holds only
immutable configuration, so one instance can serve any number of harnesses
and testcases, from any number of threads.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from seedport.constants import (
    DEFAULT_METHOD,
    DEFAULT_RECEIVER,
    MAX_SOURCE_SIZE,
    MAX_TESTCASE_SIZE,
)
from seedport.corpus import encode_corpus
from seedport.decoding import ByteSourceFactory, ConsumerCursor
from seedport.diagnostics import DecodeError
from seedport.syntax import HarnessSignature, extract_signature

__all__ = ["SeedTranslator", "TranslationResult", "convert_libfuzzer_seed"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """Outcome of translating one testcase in a batch.

    Exactly one of text and error is set.

    Attributes:
        index: Position of the testcase in the batch
        text: Corpus entry text on success
        error: Why the testcase could not be translated
    """

    index: int
    text: str | None = None
    error: DecodeError | ValueError | None = None

    def __post_init__(self) -> None:
        if (self.text is None) == (self.error is None):
            msg = "TranslationResult needs exactly one of text and error"
            raise ValueError(msg)

    @property
    def ok(self) -> bool:
        """True if the testcase was translated."""
        return self.error is None


class SeedTranslator:
    """Translate libFuzzer testcases into Go native fuzzing corpus entries.

    Example:
        >>> harness = '''
        ... func FuzzX(f *testing.F) {
        ...     f.Fuzz(func(t *testing.T, n int, ok bool) {})
        ... }'''
        >>> print(SeedTranslator().translate(harness, b"\\x05\\x01", "FuzzX"))
        go test fuzz v1
        int(5)
        bool(true)

    Attributes:
        receiver: Identifier the fuzz method is called on (default: "f")
        method: Fuzz method name (default: "Fuzz")
        max_source_size: Maximum harness source size (default: 10 MB)
        max_testcase_size: Maximum testcase size (default: 16 MB)
    """

    __slots__ = ("_cursor_factory", "_max_source_size", "_max_testcase_size", "_method", "_receiver")

    def __init__(
        self,
        *,
        receiver: str = DEFAULT_RECEIVER,
        method: str = DEFAULT_METHOD,
        max_source_size: int | None = None,
        max_testcase_size: int | None = None,
        cursor_factory: ByteSourceFactory = ConsumerCursor,
    ) -> None:
        """Initialize translator configuration.

        Args:
            receiver: Identifier the fuzz method is called on
            method: Fuzz method name
            max_source_size: Maximum harness source size. Set to 0 to
                disable the limit (not recommended).
            max_testcase_size: Maximum testcase size in bytes. Set to 0 to
                disable the limit.
            cursor_factory: Builds the ByteSource decoding each testcase

        Raises:
            ValueError: If receiver or method is not an identifier, or a
                limit is negative
        """
        for label, name in (("receiver", receiver), ("method", method)):
            if not name.isidentifier():
                msg = f"{label} must be an identifier, got: '{name}'"
                raise ValueError(msg)
        self._receiver = receiver
        self._method = method
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_SOURCE_SIZE
        )
        self._max_testcase_size = (
            max_testcase_size if max_testcase_size is not None else MAX_TESTCASE_SIZE
        )
        if self._max_source_size < 0 or self._max_testcase_size < 0:
            msg = "Size limits must be non-negative"
            raise ValueError(msg)
        self._cursor_factory = cursor_factory

    @property
    def receiver(self) -> str:
        """Identifier the fuzz method is called on."""
        return self._receiver

    @property
    def method(self) -> str:
        """Fuzz method name."""
        return self._method

    @property
    def max_source_size(self) -> int:
        """Maximum allowed harness source size."""
        return self._max_source_size

    @property
    def max_testcase_size(self) -> int:
        """Maximum allowed testcase size in bytes."""
        return self._max_testcase_size

    def __repr__(self) -> str:
        return f"SeedTranslator(receiver={self._receiver!r}, method={self._method!r})"

    def signature(self, source: str | bytes, entry_point: str) -> HarnessSignature:
        """Extract the fuzz parameter signature of entry_point.

        Raises:
            StructuralError: If no signature can be extracted
            ValueError: If source exceeds max_source_size
        """
        return extract_signature(
            source,
            entry_point,
            receiver=self._receiver,
            method=self._method,
            max_source_size=self._max_source_size,
        )

    def _check_testcase(self, testcase: bytes) -> None:
        if self._max_testcase_size > 0 and len(testcase) > self._max_testcase_size:
            msg = (
                f"Testcase size ({len(testcase):,} bytes) exceeds maximum "
                f"({self._max_testcase_size:,} bytes)"
            )
            raise ValueError(msg)

    def encode(self, signature: HarnessSignature, testcase: bytes) -> str:
        """Encode testcase for an already extracted signature.

        Raises:
            DecodeError: If the testcase cannot be decoded for signature
            ValueError: If testcase exceeds max_testcase_size
        """
        self._check_testcase(testcase)
        entry = encode_corpus(
            signature.params,
            testcase,
            cursor_factory=self._cursor_factory,
            entry_point=signature.entry_point,
        )
        return entry.to_text()

    def translate(self, source: str | bytes, testcase: bytes, entry_point: str) -> str:
        """Translate one testcase into corpus text.

        Args:
            source: Harness source
            testcase: Raw libFuzzer testcase
            entry_point: Name of the fuzz entry point

        Returns:
            Corpus entry text, starting with "go test fuzz v1"

        Raises:
            StructuralError: If the harness yields no signature
            DecodeError: If the testcase cannot be decoded
            ValueError: If source or testcase exceeds its size limit
        """
        return self.encode(self.signature(source, entry_point), testcase)

    def translate_many(
        self, source: str | bytes, testcases: Iterable[bytes], entry_point: str
    ) -> Iterator[TranslationResult]:
        """Translate a batch of testcases against one harness.

        The signature is extracted once, before this method returns, so a
        StructuralError surfaces immediately instead of on first iteration.
        Per-testcase failures are reported in the yielded results and do not
        stop the batch.

        Raises:
            StructuralError: If the harness yields no signature
            ValueError: If source exceeds max_source_size
        """
        signature = self.signature(source, entry_point)
        logger.debug("Translating batch for %s", signature)
        return self._translate_each(signature, testcases)

    def _translate_each(
        self, signature: HarnessSignature, testcases: Iterable[bytes]
    ) -> Iterator[TranslationResult]:
        for index, testcase in enumerate(testcases):
            try:
                text = self.encode(signature, testcase)
            except (DecodeError, ValueError) as e:
                logger.debug("Testcase %d not translated: %s", index, e)
                yield TranslationResult(index=index, error=e)
            else:
                yield TranslationResult(index=index, text=text)


def convert_libfuzzer_seed(harness_source: str | bytes, testcase: bytes, entry_point: str) -> str:
    """Translate one libFuzzer testcase with default settings.

    Args:
        harness_source: Go harness source containing entry_point
        testcase: Raw libFuzzer testcase
        entry_point: Name of the fuzz entry point

    Returns:
        Corpus entry text for testdata/fuzz/<entry_point>/

    Raises:
        StructuralError: If the harness yields no signature
        DecodeError: If the testcase cannot be decoded
        ValueError: If an input exceeds its default size limit
    """
    return SeedTranslator().translate(harness_source, testcase, entry_point)
