"""Tests for the seedport command line."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from seedport.cli import EXIT_HARNESS_FAILED, EXIT_OK, EXIT_TESTCASE_FAILED, main
from seedport.corpus import corpus_directory, corpus_filename

# []byte("seed"), int 7, bool false
TESTCASE = b"\x04\x00\x00\x00\x01seed\x07\x00"
EXPECTED = 'go test fuzz v1\n[]byte("seed")\nint(7)\nbool(false)'


def _write(path: Path, data: bytes) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


def _args(harness: Path, *extra: str) -> list[str]:
    return ["--harness", str(harness), "--entry", "FuzzParse", *extra]


# ============================================================================
# SUCCESS
# ============================================================================


class TestCliTranslate:
    """Successful runs."""

    def test_default_output_next_to_harness(self, harness_file: Path, tmp_path: Path) -> None:
        """Entries land in <harness dir>/testdata/fuzz/<entry>/."""
        testcase = _write(tmp_path / "crash-1", TESTCASE)

        assert main(_args(harness_file, str(testcase))) == EXIT_OK

        expected_path = corpus_directory(harness_file.parent, "FuzzParse") / corpus_filename(EXPECTED)
        assert expected_path.read_text(encoding="utf-8") == EXPECTED

    def test_stdout(
        self, harness_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """--stdout prints each entry followed by a newline."""
        testcase = _write(tmp_path / "crash-1", TESTCASE)

        assert main(_args(harness_file, "--stdout", str(testcase))) == EXIT_OK

        assert capsys.readouterr().out == EXPECTED + "\n"
        assert not (harness_file.parent / "testdata").exists()

    def test_out_dir_and_directory_input(self, harness_file: Path, tmp_path: Path) -> None:
        """Directories expand to their files; --out-dir overrides the default."""
        seeds = tmp_path / "seeds"
        _write(seeds / "a", TESTCASE)
        _write(seeds / "b", TESTCASE[:-1] + b"\x01")
        out_dir = tmp_path / "out"

        assert main(_args(harness_file, "--out-dir", str(out_dir), str(seeds))) == EXIT_OK

        texts = sorted(p.read_text(encoding="utf-8") for p in out_dir.iterdir())
        assert texts == sorted([EXPECTED, EXPECTED.replace("bool(false)", "bool(true)")])

    def test_custom_receiver_and_method(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--receiver and --method select the fuzz call."""
        harness = tmp_path / "h.go"
        harness.write_text("func FuzzParse(fz *F) {\n\tfz.Run(func(t *T, n int) {})\n}\n")
        testcase = _write(tmp_path / "t", b"\x2a")

        code = main(
            _args(harness, "--receiver", "fz", "--method", "Run", "--stdout", str(testcase))
        )

        assert code == EXIT_OK
        assert capsys.readouterr().out == "go test fuzz v1\nint(42)\n"

    def test_verbose_logs_progress(
        self, harness_file: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Successful writes are logged at INFO."""
        testcase = _write(tmp_path / "crash-1", TESTCASE)

        with caplog.at_level(logging.INFO, logger="seedport"):
            main(_args(harness_file, "-v", str(testcase)))

        assert "Translated 1 testcase(s), 0 failed" in caplog.text


# ============================================================================
# TESTCASE FAILURES
# ============================================================================


class TestCliTestcaseFailures:
    """Exit code 1 when a testcase cannot be translated."""

    def test_short_testcase(
        self, harness_file: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A short testcase is reported with its diagnostic."""
        testcase = _write(tmp_path / "short", b"\x01")

        assert main(_args(harness_file, "--stdout", str(testcase))) == EXIT_TESTCASE_FAILED
        assert "error[INPUT_EXHAUSTED]" in caplog.text

    def test_stops_at_first_failure(self, harness_file: Path, tmp_path: Path) -> None:
        """Without --keep-going, later testcases are not processed."""
        seeds = tmp_path / "seeds"
        _write(seeds / "a_short", b"")
        _write(seeds / "b_good", TESTCASE)
        out_dir = tmp_path / "out"

        assert main(_args(harness_file, "--out-dir", str(out_dir), str(seeds))) == EXIT_TESTCASE_FAILED
        assert not out_dir.exists()

    def test_keep_going(self, harness_file: Path, tmp_path: Path) -> None:
        """--keep-going translates the rest but still exits 1."""
        seeds = tmp_path / "seeds"
        _write(seeds / "a_short", b"")
        _write(seeds / "b_good", TESTCASE)
        out_dir = tmp_path / "out"

        code = main(_args(harness_file, "--out-dir", str(out_dir), "--keep-going", str(seeds)))

        assert code == EXIT_TESTCASE_FAILED
        assert [p.read_text(encoding="utf-8") for p in out_dir.iterdir()] == [EXPECTED]

    def test_missing_testcase_file(
        self, harness_file: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Unreadable testcases count as failures."""
        missing = tmp_path / "nope"

        assert main(_args(harness_file, "--stdout", str(missing))) == EXIT_TESTCASE_FAILED
        assert "nope" in caplog.text

    @pytest.mark.parametrize(("mode", "colored"), [("always", True), ("never", False)])
    def test_color(
        self,
        harness_file: Path,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
        mode: str,
        colored: bool,
    ) -> None:
        """--color controls ANSI highlighting of the error label."""
        testcase = _write(tmp_path / "short", b"")

        main(_args(harness_file, "--stdout", "--color", mode, str(testcase)))

        assert ("\033[1;31merror\033[0m[INPUT_EXHAUSTED]" in caplog.text) is colored

    def test_json_report(
        self, harness_file: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """--format json reports diagnostics as JSON."""
        testcase = _write(tmp_path / "short", b"")

        main(_args(harness_file, "--stdout", "--format", "json", str(testcase)))

        message = next(r.getMessage() for r in caplog.records if "not translated" in r.getMessage())
        report = message.split("\n", 1)[1]
        assert json.loads(report)["code"] == "INPUT_EXHAUSTED"


# ============================================================================
# HARNESS FAILURES
# ============================================================================


class TestCliHarnessFailures:
    """Exit code 2 when the harness cannot be used."""

    def test_missing_harness(self, tmp_path: Path) -> None:
        """An unreadable harness exits 2."""
        testcase = _write(tmp_path / "t", TESTCASE)

        assert main(_args(tmp_path / "missing.go", str(testcase))) == EXIT_HARNESS_FAILED

    def test_unknown_entry_point(
        self, harness_file: Path, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A missing entry point exits 2 with its diagnostic."""
        testcase = _write(tmp_path / "t", TESTCASE)

        code = main(["--harness", str(harness_file), "--entry", "FuzzNope", str(testcase)])

        assert code == EXIT_HARNESS_FAILED
        assert "ENTRY_POINT_NOT_FOUND" in caplog.text

    def test_invalid_entry_point_name(self, harness_file: Path, tmp_path: Path) -> None:
        """Path-like entry point names exit 2."""
        testcase = _write(tmp_path / "t", TESTCASE)

        code = main(["--harness", str(harness_file), "--entry", "../FuzzParse", str(testcase)])

        assert code == EXIT_HARNESS_FAILED

    def test_invalid_receiver(self, harness_file: Path, tmp_path: Path) -> None:
        """A non-identifier receiver exits 2."""
        testcase = _write(tmp_path / "t", TESTCASE)

        assert main(_args(harness_file, "--receiver", "a.b", str(testcase))) == EXIT_HARNESS_FAILED


# ============================================================================
# ARGUMENT PARSING
# ============================================================================


class TestCliArguments:
    """argparse rejects bad invocations with exit code 2."""

    def test_out_dir_and_stdout_exclusive(self, harness_file: Path) -> None:
        """--out-dir and --stdout cannot be combined."""
        with pytest.raises(SystemExit) as exc_info:
            main(_args(harness_file, "--stdout", "--out-dir", "x", "t"))

        assert exc_info.value.code == 2

    def test_testcase_required(self, harness_file: Path) -> None:
        """At least one testcase is needed."""
        with pytest.raises(SystemExit) as exc_info:
            main(_args(harness_file))

        assert exc_info.value.code == 2
