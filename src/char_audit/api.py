"""
char_audit.api
==============

Programmatic entrypoints for using char_audit as a library.

Goals:
  - No argparse / CLI dependencies
  - Stable, JSON-friendly outputs that match the CLI's ``--json`` contract

Non-goals:
  - Owning presentation (text report, exit codes) — callers decide

Usage::

    from char_audit.api import scan_pattern

    result, records = scan_pattern("src/**/*.ts", scan_bundles=True)
    if result.detections:
        ...
"""

from __future__ import annotations

from typing import Any

from char_audit.contracts.load import validate_detections
from char_audit.core.config import ScanConfig
from char_audit.core.discover import FileSource
from char_audit.core.runner import scan_files
from char_audit.model.run_result import ScanResult


def scan_pattern(
    pattern: str,
    *,
    scan_bundles: bool = False,
    verbose: bool = False,
    source: FileSource | None = None,
) -> tuple[ScanResult, list[dict[str, Any]]]:
    """Scan every file matched by *pattern*.

    Parameters
    ----------
    pattern:
        Glob pattern; ``**`` matches across directories.
    scan_bundles:
        Also scan ``dist/``, ``build/``, ``out/``, ``.next/`` and ``.nuxt/``.
    verbose:
        Log each ignored or unreadable file at WARNING level.
    source:
        Override the filesystem access (see ``core.discover.FileSource``).

    Returns
    -------
    ``(ScanResult, records)``
        The aggregate result and its detections as schema-valid dicts.

    Raises
    ------
    InvalidPatternError
        If *pattern* cannot be parsed.
    """
    config = ScanConfig(pattern=pattern, verbose=verbose, scan_bundles=scan_bundles)
    result = scan_files(config, source=source)
    records = [d.to_dict() for d in result.detections]
    validate_detections(records)
    return result, records
