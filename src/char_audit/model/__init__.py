"""Value types shared across the engine and presentation layers."""

from __future__ import annotations

from char_audit.model.detection import Detection
from char_audit.model.run_result import ScanResult, SkippedPath

__all__ = ["Detection", "ScanResult", "SkippedPath"]
