"""ScanResult — aggregate output of one collector run."""

from __future__ import annotations

from dataclasses import dataclass, field

from char_audit.model.detection import Detection


@dataclass(frozen=True, slots=True)
class SkippedPath:
    """A candidate path that was not scanned, with the reason why."""

    path: str
    reason: str


@dataclass(slots=True)
class ScanResult:
    """Detections plus the scanned/skipped counters for a single invocation.

    ``scanned`` counts every candidate that passed the path filter, including
    files that later failed to read.  ``skipped`` counts filtered paths *and*
    read failures, so one unreadable file bumps both counters.
    """

    detections: list[Detection] = field(default_factory=list)
    scanned: int = 0
    skipped: int = 0
    skipped_paths: list[SkippedPath] = field(default_factory=list)

    @property
    def no_matches(self) -> bool:
        """True when the pattern matched nothing at all."""
        return self.scanned == 0 and self.skipped == 0

    @property
    def has_detections(self) -> bool:
        return bool(self.detections)
