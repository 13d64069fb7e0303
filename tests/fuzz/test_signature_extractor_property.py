"""Hypothesis-based property tests for signature extraction.

Generated harnesses vary parameter layout (named, grouped, unnamed) and the
source around the fuzz call; the extracted signature must always list the
declared types in order.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from seedport.diagnostics import StructuralError
from seedport.syntax import GoHarnessFrontend, extract_signature
from tests.strategies import UNSUPPORTED_TYPE_NAMES, harness_sources, type_name_lists

pytestmark = pytest.mark.fuzz


class TestExtractSignatureProperties:
    """Properties of extract_signature() over generated harnesses."""

    @given(harness=harness_sources())
    @settings(max_examples=300)
    def test_signature_matches_declared_types(self, harness: tuple[str, list[str]]) -> None:
        """Spellings come back exactly as declared, in order."""
        source, types = harness
        event(f"param_count={len(types)}")

        signature = extract_signature(source, "FuzzGen")

        assert list(signature.spellings) == types

    @given(harness=harness_sources())
    @settings(max_examples=100)
    def test_bytes_and_text_agree(self, harness: tuple[str, list[str]]) -> None:
        """UTF-8 bytes and text give the same signature."""
        source, _ = harness

        assert extract_signature(source.encode("utf-8"), "FuzzGen") == extract_signature(
            source, "FuzzGen"
        )

    @given(
        known=type_name_lists(max_size=4),
        unknown=st.sampled_from(UNSUPPORTED_TYPE_NAMES),
        data=st.data(),
    )
    @settings(max_examples=100)
    def test_unknown_names_still_extract(
        self, known: list[str], unknown: str, data: st.DataObject
    ) -> None:
        """Extraction does not judge decodability; bare names and slices pass."""
        source, declared = data.draw(harness_sources(types=[*known, unknown]))

        assert list(extract_signature(source, "FuzzGen").spellings) == declared

    @given(harness=harness_sources(), name=st.sampled_from(["FuzzOther", "fuzzgen", "Fuzz"]))
    @settings(max_examples=100)
    def test_other_entry_points_not_found(self, harness: tuple[str, list[str]], name: str) -> None:
        """Only the declared entry point is found."""
        source, _ = harness

        with pytest.raises(StructuralError):
            extract_signature(source, name)

    @given(text=st.text(alphabet="func(){}[]\"'`/*\n xf.Fuzz", max_size=80))
    @settings(max_examples=300)
    def test_arbitrary_text_never_crashes(self, text: str) -> None:
        """Junk source raises StructuralError or succeeds, nothing else."""
        try:
            GoHarnessFrontend(text)
            extract_signature(text, "Fuzz")
        except StructuralError:
            event("outcome=structural_error")
        else:
            event("outcome=extracted")
