#!/usr/bin/env python3
"""Seed Translation Fuzzer (Atheris).

Targets: seedport.extract_signature, seedport.encode_corpus, SeedTranslator

Checks that arbitrary harness text only ever fails with StructuralError or
ValueError, that arbitrary testcases only ever fail with DecodeError, and that
every successful translation has the marker line plus one literal per
parameter and is reproduced exactly by a second run.

Patterns:
- random_testcase: Fixed harness covering every supported type, fuzzed bytes
- random_signature: Generated harness signature, fuzzed bytes
- raw_harness: Fuzzed bytes as harness source
- grouped_params: Go parameter grouping (a, b int) against flat signatures

Report:
    A JSON summary is printed to stderr between [SUMMARY-JSON-BEGIN] and
    [SUMMARY-JSON-END] at exit, and written to
    .fuzz_atheris_corpus/translate/fuzz_translate_report.json. It carries
    failure tallies keyed by diagnostic code, determinism mismatches and
    RSS samples.

Usage:
    python fuzz_atheris/fuzz_translate.py -max_total_time=60
"""

from __future__ import annotations

import argparse
import atexit
import gc
import json
import os
import pathlib
import statistics
import sys
from collections import Counter, deque
from dataclasses import dataclass, field
from typing import Any

# --- Dependency Checks ---

_MISSING: list[str] = []
try:
    import psutil
except ImportError:
    _MISSING.append("psutil")
try:
    import atheris
except ImportError:
    _MISSING.append("atheris")

if _MISSING:
    print("-" * 80, file=sys.stderr)
    print(f"ERROR: Missing fuzzing dependencies: {', '.join(_MISSING)}", file=sys.stderr)
    print("Install with: pip install -e '.[atheris]'", file=sys.stderr)
    print("-" * 80, file=sys.stderr)
    sys.exit(1)

with atheris.instrument_imports():
    from seedport import (
        DecodeError,
        SeedPortError,
        SeedTranslator,
        StructuralError,
        __corpus_format__,
        extract_signature,
    )
    from seedport.enums import GoKind

# --- Constants ---

GC_INTERVAL = 256
"""Periodic gc.collect() interval to reclaim Atheris instrumentation cycles."""

RSS_SAMPLE_INTERVAL = 100

_PATTERN_WEIGHTS: tuple[tuple[str, int], ...] = (
    ("random_testcase", 10),
    ("random_signature", 10),
    ("raw_harness", 5),
    ("grouped_params", 5),
)

# Each pattern appears weight times; iteration N runs entry (N - 1) % len
_PATTERN_SCHEDULE: tuple[str, ...] = tuple(
    name for name, weight in _PATTERN_WEIGHTS for _ in range(weight)
)

_TYPE_NAMES: tuple[str, ...] = (*(kind.value for kind in GoKind), "byte", "[]uint8")

_ALL_TYPES_HARNESS = (
    "package fuzz\n\nimport \"testing\"\n\n"
    "func FuzzAll(f *testing.F) {\n"
    "\tf.Fuzz(func(t *testing.T, "
    + ", ".join(f"p{i} {name}" for i, name in enumerate(_TYPE_NAMES))
    + ") {})\n}\n"
)

_REPORT_DIR = pathlib.Path(".fuzz_atheris_corpus") / "translate"
_REPORT_FILENAME = "fuzz_translate_report.json"


# --- Fuzzer State ---


@dataclass
class TranslateFuzzState:
    """Counters for one fuzzing session."""

    iterations: int = 0
    findings: int = 0
    status: str = "incomplete"

    translations: int = 0
    signatures: int = 0
    determinism_mismatches: int = 0
    size_rejections: int = 0
    structural_failures: Counter[str] = field(default_factory=Counter)
    decode_failures: Counter[str] = field(default_factory=Counter)
    pattern_coverage: Counter[str] = field(default_factory=Counter)

    initial_rss_mb: float = 0.0
    rss_history: deque[float] = field(default_factory=lambda: deque(maxlen=1000))

    def record_failure(self, error: SeedPortError) -> None:
        """Tally a translation failure under its diagnostic code."""
        key = error.diagnostic.code.name if error.diagnostic is not None else "UNCODED"
        tally = self.structural_failures if isinstance(error, StructuralError) else self.decode_failures
        tally[key] += 1

    def to_stats(self) -> dict[str, Any]:
        stats: dict[str, Any] = {
            "status": self.status,
            "iterations": self.iterations,
            "findings": self.findings,
            "translations": self.translations,
            "signatures": self.signatures,
            "determinism_mismatches": self.determinism_mismatches,
            "size_rejections": self.size_rejections,
            "structural_failures": dict(self.structural_failures),
            "decode_failures": dict(self.decode_failures),
            "pattern_coverage": dict(self.pattern_coverage),
            "initial_rss_mb": round(self.initial_rss_mb, 2),
        }
        if self.rss_history:
            stats["rss_peak_mb"] = round(max(self.rss_history), 2)
            stats["rss_mean_mb"] = round(statistics.fmean(self.rss_history), 2)
        return stats


class TranslateFuzzError(Exception):
    """Raised when an invariant breach is detected."""


# --- Module State ---

_state = TranslateFuzzState()
_translator = SeedTranslator()
_process = psutil.Process(os.getpid())


def _rss_mb() -> float:
    return _process.memory_info().rss / (1024 * 1024)


def _emit_report() -> None:
    _state.status = "complete"
    report = json.dumps(_state.to_stats(), sort_keys=True)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr, flush=True)
    try:
        _REPORT_DIR.mkdir(parents=True, exist_ok=True)
        (_REPORT_DIR / _REPORT_FILENAME).write_text(report, encoding="utf-8")
    except OSError as e:
        print(f"[WARN] Could not write report: {e}", file=sys.stderr)


atexit.register(_emit_report)


# --- Invariants ---


def _check_entry(text: str, param_count: int) -> None:
    lines = text.split("\n")
    if lines[0] != __corpus_format__:
        msg = f"Corpus entry does not start with marker: {lines[0]!r}"
        raise TranslateFuzzError(msg)
    if len(lines) != param_count + 1:
        msg = f"Expected {param_count} literals, got {len(lines) - 1}"
        raise TranslateFuzzError(msg)


def _encode(harness: str, entry_point: str, testcase: bytes, param_count: int) -> None:
    try:
        text = _translator.translate(harness, testcase, entry_point)
    except DecodeError as e:
        _state.record_failure(e)
        return
    _state.translations += 1
    _check_entry(text, param_count)
    if _translator.translate(harness, testcase, entry_point) != text:
        _state.determinism_mismatches += 1
        msg = "Translation is not deterministic"
        raise TranslateFuzzError(msg)


def _extract(harness: str, entry_point: str, expected: list[str]) -> None:
    signature = extract_signature(harness, entry_point)
    _state.signatures += 1
    if list(signature.spellings) != expected:
        msg = f"Signature {signature.spellings} does not match declared {expected}"
        raise TranslateFuzzError(msg)


# --- Patterns ---


def _pattern_random_testcase(fdp: atheris.FuzzedDataProvider) -> None:
    testcase = fdp.ConsumeBytes(fdp.remaining_bytes())
    _encode(_ALL_TYPES_HARNESS, "FuzzAll", testcase, len(_TYPE_NAMES))


def _pattern_random_signature(fdp: atheris.FuzzedDataProvider) -> None:
    count = fdp.ConsumeIntInRange(0, 8)
    names = [fdp.PickValueInList(list(_TYPE_NAMES)) for _ in range(count)]
    params = "".join(f", v{i} {name}" for i, name in enumerate(names))
    harness = f"func FuzzGen(f *testing.F) {{\n\tf.Fuzz(func(t *testing.T{params}) {{}})\n}}\n"
    _extract(harness, "FuzzGen", names)
    _encode(harness, "FuzzGen", fdp.ConsumeBytes(fdp.remaining_bytes()), count)


def _pattern_raw_harness(fdp: atheris.FuzzedDataProvider) -> None:
    source = fdp.ConsumeUnicodeNoSurrogates(fdp.remaining_bytes())
    try:
        extract_signature(source, "FuzzX")
    except StructuralError as e:
        _state.record_failure(e)
    else:
        _state.signatures += 1


def _pattern_grouped_params(fdp: atheris.FuzzedDataProvider) -> None:
    count = fdp.ConsumeIntInRange(1, 6)
    name = fdp.PickValueInList(list(_TYPE_NAMES))
    names = ", ".join(f"v{i}" for i in range(count))
    harness = f"func FuzzGroup(f *testing.F) {{ f.Fuzz(func(t *testing.T, {names} {name}) {{}}) }}"
    _extract(harness, "FuzzGroup", [name] * count)


_PATTERN_DISPATCH: dict[str, Any] = {
    "random_testcase": _pattern_random_testcase,
    "random_signature": _pattern_random_signature,
    "raw_harness": _pattern_raw_harness,
    "grouped_params": _pattern_grouped_params,
}


def test_one_input(data: bytes) -> None:
    """Atheris entry point: fuzz signature extraction and corpus encoding."""
    if _state.iterations == 0:
        _state.initial_rss_mb = _rss_mb()

    _state.iterations += 1
    _state.status = "running"

    fdp = atheris.FuzzedDataProvider(data)
    pattern = _PATTERN_SCHEDULE[(_state.iterations - 1) % len(_PATTERN_SCHEDULE)]
    _state.pattern_coverage[pattern] += 1

    try:
        _PATTERN_DISPATCH[pattern](fdp)
    except TranslateFuzzError:
        _state.findings += 1
        raise
    except ValueError:
        # Size limits; every other failure must be a SeedPortError
        _state.size_rejections += 1
    finally:
        if _state.iterations % GC_INTERVAL == 0:
            gc.collect()
        if _state.iterations % RSS_SAMPLE_INTERVAL == 0:
            _state.rss_history.append(_rss_mb())


def main() -> None:
    """Run the translation fuzzer with CLI support."""
    parser = argparse.ArgumentParser(
        description="Seed translation fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    _, remaining = parser.parse_known_args()

    if not any(arg.startswith("-rss_limit_mb") for arg in remaining):
        remaining.append("-rss_limit_mb=4096")

    sys.argv = [sys.argv[0], *remaining]
    print("Seed Translation Fuzzer (Atheris)")
    print("Target: extract_signature, encode_corpus, SeedTranslator")
    print(f"Patterns: {len(_PATTERN_WEIGHTS)} (schedule length {len(_PATTERN_SCHEDULE)})")

    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
