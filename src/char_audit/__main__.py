"""CLI entry-point for char_audit.

Usage:
    python -m char_audit "<pattern>"
    python -m char_audit "<pattern>" --json
    python -m char_audit "<pattern>" --verbose --scan-bundles
    python -m char_audit "<pattern>" --fail-on-skip
"""

from __future__ import annotations

import argparse
import logging
import sys

import jsonschema

from char_audit import __version__
from char_audit.contracts.load import validate_detections
from char_audit.core.config import ScanConfig
from char_audit.core.runner import scan_files
from char_audit.errors import CharAuditError
from char_audit.model.run_result import ScanResult
from char_audit.policy.exit_codes import exit_code_for_result, strict_mode_failed
from char_audit.reports.text import format_text_output
from char_audit.utils.exit_codes import ExitCode
from char_audit.utils.json_norm import stable_json_dumps

_DESCRIPTION = "Invisible Character Detector - Find suspicious Unicode in code"

_EPILOG = """\
examples:
  char-audit "**/*.rs"
  char-audit "src/**/*.ts" --json
  char-audit "**/*.js" --verbose
  char-audit "**/*.tsx" --scan-bundles

detects:
  - Zero-width / joiners (U+200B, U+200C, U+200D, U+2060, U+FEFF)
  - Bidirectional controls (U+202A-U+202E, U+2066-U+2069)
  - Directional marks (U+200E, U+200F, U+061C)
  - Variation selectors (U+FE00-U+FE0F)
  - Line/paragraph separators (U+2028, U+2029)
  - Select non-ASCII whitespace (e.g., U+00A0, U+2007, U+202F)
  - Private Use Area characters
  - Suspicious control characters

exit codes:
  0  No suspicious characters found
  1  Suspicious characters detected (fail in CI)
  2  Operational error (invalid pattern, read failure with --fail-on-skip)
"""


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="char-audit",
        description=_DESCRIPTION,
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "pattern",
        help='Glob pattern of files to scan, e.g. "**/*.rs" (quote it).',
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        default=False,
        help="Output results as JSON (for CI/tooling integration).",
    )
    p.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Show details about ignored/unreadable files.",
    )
    p.add_argument(
        "--scan-bundles",
        dest="scan_bundles",
        action="store_true",
        default=False,
        help="Include dist/, build/, out/ directories (useful for bundled extensions).",
    )
    p.add_argument(
        "--fail-on-skip",
        dest="fail_on_skip",
        action="store_true",
        default=False,
        help="Exit with code 2 if any files are skipped (strict mode).",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def _config_from_args(args: argparse.Namespace) -> ScanConfig:
    return ScanConfig(
        pattern=args.pattern,
        json_output=args.json_output,
        verbose=args.verbose,
        fail_on_skip=args.fail_on_skip,
        scan_bundles=args.scan_bundles,
    )


def _configure_logging() -> None:
    """Send engine diagnostics to stderr as bare messages."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        stream=sys.stderr,
    )


def _make_stdout_safe() -> None:
    """Escape characters the stdout encoding cannot hold instead of failing.

    A cp1252 pipe on a Windows runner cannot carry U+202E; with
    ``backslashreplace`` it is written as ``\\u202e``, which is still valid
    inside a JSON string.
    """
    reconfigure = getattr(sys.stdout, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="backslashreplace")


def _render_json(result: ScanResult) -> str:
    """Serialize detections; raises if the output breaks its contract."""
    records = [d.to_dict() for d in result.detections]
    validate_detections(records)
    return stable_json_dumps(records)


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = clean, 1 = detections, 2 = error)."""
    effective_argv = list(argv) if argv is not None else sys.argv[1:]
    parser = _build_parser()

    # Bare invocation prints help rather than a usage error.
    if not effective_argv:
        parser.print_help()
        return ExitCode.SUCCESS

    args = parser.parse_args(effective_argv)
    config = _config_from_args(args)
    _configure_logging()
    _make_stdout_safe()

    # Keep stdout pure JSON when --json is set.
    info_stream = sys.stderr if config.json_output else sys.stdout

    if not config.json_output:
        print(f"Scanning files matching: {config.pattern}")
    if config.verbose:
        print(
            f"Options: json={str(config.json_output).lower()}, "
            f"scan_bundles={str(config.scan_bundles).lower()}, "
            f"fail_on_skip={str(config.fail_on_skip).lower()}",
            file=info_stream,
        )

    try:
        result = scan_files(config)
    except CharAuditError as e:
        print(f"Error scanning files: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if config.verbose:
        print(
            f"Scanned: {result.scanned} files, Skipped: {result.skipped} files\n",
            file=info_stream,
        )

    if config.json_output:
        try:
            sys.stdout.write(_render_json(result))
        except (jsonschema.ValidationError, TypeError, ValueError) as e:
            print(f"Error serializing to JSON: {e}", file=sys.stderr)
            return ExitCode.ERROR
    else:
        try:
            print(format_text_output(result.detections))
        except UnicodeEncodeError as e:
            print(f"Error writing report: {e}", file=sys.stderr)
            return ExitCode.ERROR

    # Strict mode: report after rendering so both diagnostics are visible.
    if strict_mode_failed(result, fail_on_skip=config.fail_on_skip):
        print(
            f"{result.skipped} files were skipped (--fail-on-skip enabled)",
            file=sys.stderr,
        )

    return exit_code_for_result(result, fail_on_skip=config.fail_on_skip)


if __name__ == "__main__":
    raise SystemExit(main())
