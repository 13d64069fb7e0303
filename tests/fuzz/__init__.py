"""Intensive property tests for seedport.

These tests are marked with pytest.mark.fuzz and skipped in normal runs:
- test_signature_extractor_property: generated harnesses round-trip their signature
- test_corpus_encoder_property: generated testcases decode to their known values

Run via: pytest -m fuzz

Python 3.13+.
"""
