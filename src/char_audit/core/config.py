"""Scan configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScanConfig:
    """Immutable scan configuration, built once per invocation by the CLI."""

    pattern: str
    json_output: bool = False   # print detections as JSON instead of text
    verbose: bool = False       # report ignored/unreadable files
    fail_on_skip: bool = False  # strict mode: any skip is an operational failure
    scan_bundles: bool = False  # include dist/, build/, out/, .next/, .nuxt/
