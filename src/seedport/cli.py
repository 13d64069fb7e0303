"""seedport command line: translate libFuzzer testcases into Go corpus entries.

Usage:
    seedport --harness fuzz_test.go --entry FuzzParse crash-1234 seeds/
    seedport --harness fuzz_test.go --entry FuzzParse --stdout crash-1234
    seedport --harness fuzz_test.go --entry FuzzParse --out-dir corpus/ --keep-going seeds/

Without --out-dir or --stdout, entries are written next to the harness, in
testdata/fuzz/<entry>/, where `go test` picks them up as seed corpus.

Exit Codes:
    0   Every testcase translated
    1   At least one testcase could not be translated
    2   Harness could not be read or analysed, or bad arguments

Python 3.13+.
"""

import argparse
import logging
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

from seedport.constants import DEFAULT_METHOD, DEFAULT_RECEIVER
from seedport.corpus import corpus_directory, write_corpus_entry
from seedport.diagnostics import (
    DecodeError,
    DiagnosticFormatter,
    OutputFormat,
    SeedPortError,
    StructuralError,
)
from seedport.syntax import HarnessSignature
from seedport.translator import SeedTranslator

__all__ = ["main"]

logger = logging.getLogger("seedport")

EXIT_OK = 0
EXIT_TESTCASE_FAILED = 1
EXIT_HARNESS_FAILED = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seedport",
        description="Translate libFuzzer testcases into Go native fuzzing corpus entries.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert a crash file into the harness package's seed corpus:
  seedport --harness parser/fuzz_test.go --entry FuzzParse crash-5f1c

  # Convert a whole libFuzzer corpus, skipping testcases that are too short:
  seedport --harness parser/fuzz_test.go --entry FuzzParse --keep-going corpus/

  # Inspect the translation without writing files:
  seedport --harness parser/fuzz_test.go --entry FuzzParse --stdout crash-5f1c
""",
    )
    parser.add_argument("testcases", nargs="+", type=Path, help="Testcase files or directories")
    parser.add_argument(
        "--harness", required=True, type=Path, help="Go source with the fuzz entry point"
    )
    parser.add_argument("--entry", required=True, help="Fuzz entry point name, e.g. FuzzParse")
    parser.add_argument(
        "--receiver",
        default=DEFAULT_RECEIVER,
        help=f"Receiver of the fuzz call (default: {DEFAULT_RECEIVER})",
    )
    parser.add_argument(
        "--method", default=DEFAULT_METHOD, help=f"Fuzz method name (default: {DEFAULT_METHOD})"
    )

    output = parser.add_mutually_exclusive_group()
    output.add_argument("--out-dir", type=Path, help="Directory to write corpus entries into")
    output.add_argument("--stdout", action="store_true", help="Print entries instead of writing files")

    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Continue after a testcase fails instead of stopping",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.RUST.value,
        help="Error report style (default: rust)",
    )
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Highlight errors in rust-style reports (default: auto, when stderr is a terminal)",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Log progress")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Log errors only")
    return parser


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _expand_testcases(paths: Sequence[Path]) -> Iterator[Path]:
    """Yield files as given and the regular files of directories, sorted."""
    for path in paths:
        if path.is_dir():
            yield from sorted(p for p in path.iterdir() if p.is_file())
        else:
            yield path


def _report(formatter: DiagnosticFormatter, error: SeedPortError) -> str:
    if error.diagnostic is not None:
        return formatter.format(error.diagnostic)
    return str(error)


def _translate_files(
    translator: SeedTranslator,
    signature: HarnessSignature,
    testcases: Iterator[Path],
    out_dir: Path | None,
    *,
    keep_going: bool,
    formatter: DiagnosticFormatter,
) -> int:
    translated = failed = 0
    for path in testcases:
        try:
            text = translator.encode(signature, path.read_bytes())
            if out_dir is None:
                sys.stdout.write(text + "\n")
            else:
                written = write_corpus_entry(out_dir, text)
                logger.info("%s -> %s", path, written)
        except DecodeError as e:
            logger.error("%s: not translated\n%s", path, _report(formatter, e))
        except (OSError, ValueError) as e:
            logger.error("%s: %s", path, e)
        else:
            translated += 1
            continue

        failed += 1
        if not keep_going:
            break

    logger.info("Translated %d testcase(s), %d failed", translated, failed)
    return EXIT_TESTCASE_FAILED if failed else EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Run the seedport command line.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.quiet)
    color = args.color == "always" or (args.color == "auto" and sys.stderr.isatty())
    formatter = DiagnosticFormatter(output_format=OutputFormat(args.format), color=color)

    try:
        translator = SeedTranslator(
            receiver=args.receiver,
            method=args.method,
        )
        source = args.harness.read_bytes()
        signature = translator.signature(source, args.entry)
        out_dir: Path | None = None
        if not args.stdout:
            out_dir = args.out_dir or corpus_directory(args.harness.parent, args.entry)
    except StructuralError as e:
        logger.error("%s: cannot extract signature\n%s", args.harness, _report(formatter, e))
        return EXIT_HARNESS_FAILED
    except (OSError, ValueError) as e:
        logger.error("%s: %s", args.harness, e)
        return EXIT_HARNESS_FAILED

    logger.debug("Signature: %s", signature)
    return _translate_files(
        translator,
        signature,
        _expand_testcases(args.testcases),
        out_dir,
        keep_going=args.keep_going,
        formatter=formatter,
    )


if __name__ == "__main__":
    sys.exit(main())
