"""Runner — expand the pattern, filter, scan each file, aggregate results."""

from __future__ import annotations

import logging

from char_audit.core.config import ScanConfig
from char_audit.core.discover import (
    FileSource,
    LocalFileSource,
    display_path,
    should_ignore_path,
)
from char_audit.core.scanner import detect_invisible_characters
from char_audit.model.run_result import ScanResult, SkippedPath

_logger = logging.getLogger(__name__)


def scan_files(config: ScanConfig, source: FileSource | None = None) -> ScanResult:
    """Scan every file matched by ``config.pattern``.

    Files are processed one at a time in discovery order.  Ignored paths
    and files that cannot be read as UTF-8 are counted as skips and never
    abort the run; they are only reported individually when
    ``config.verbose`` is set.

    Raises
    ------
    InvalidPatternError
        If the glob pattern cannot be parsed.
    """
    src = source if source is not None else LocalFileSource()
    candidates = src.expand(config.pattern)

    # Verbose mode surfaces per-file skips; otherwise they stay at DEBUG.
    skip_level = logging.WARNING if config.verbose else logging.DEBUG

    result = ScanResult()
    for path in candidates:
        shown = display_path(path)
        if should_ignore_path(shown, config.scan_bundles):
            result.skipped += 1
            result.skipped_paths.append(SkippedPath(path=shown, reason="ignored"))
            _logger.log(skip_level, "  (ignored) %s", shown)
            continue

        result.scanned += 1

        try:
            content = src.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            reason = display_path(str(exc))
            result.skipped += 1
            result.skipped_paths.append(SkippedPath(path=shown, reason=reason))
            _logger.log(skip_level, "Could not read %s: %s", shown, reason)
            continue

        result.detections.extend(detect_invisible_characters(content, shown))

    if result.no_matches:
        _logger.warning("No files matched pattern: %s", config.pattern)

    return result
