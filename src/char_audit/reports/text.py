"""Human-readable report: detections grouped by file, files sorted."""

from __future__ import annotations

from collections import defaultdict
from typing import Sequence

from char_audit.core.classify import format_code_point
from char_audit.model.detection import Detection

NO_DETECTIONS_MESSAGE = "No suspicious invisible characters detected."


def format_detection(d: Detection) -> str:
    """Two-line entry: coordinates and label, then the rationale."""
    return (
        f"    Line {d.line}:{d.char_index} (byte {d.byte_offset})"
        f" - {d.name} ({format_code_point(d.code)})\n"
        f"  {d.description}\n"
    )


def format_text_output(detections: Sequence[Detection]) -> str:
    """Render *detections* grouped by file.

    Files are sorted lexicographically so output is stable regardless of
    discovery order; within a file, detections keep scan order.
    """
    if not detections:
        return NO_DETECTIONS_MESSAGE

    grouped: dict[str, list[Detection]] = defaultdict(list)
    for d in detections:
        grouped[d.file].append(d)

    parts = [f"Found {len(detections)} suspicious character(s):\n\n"]
    for file in sorted(grouped):
        parts.append(f"{file}\n")
        parts.extend(format_detection(d) for d in grouped[file])
        parts.append("\n")
    return "".join(parts)
