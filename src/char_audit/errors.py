"""Fatal error types raised by the scan engine.

Per-file problems (unreadable files, non-UTF-8 content, ignored paths) are
*not* errors: the collector counts them as skips and keeps going.  Only the
conditions below abort a run (CLI exit-code 2).
"""

from __future__ import annotations


class CharAuditError(Exception):
    """Base class for operational failures that abort a scan."""


class InvalidPatternError(CharAuditError, ValueError):
    """Raised when the glob pattern itself cannot be parsed."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid glob pattern: {reason} (pattern: {pattern!r})")
