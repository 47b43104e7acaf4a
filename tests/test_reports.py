"""Tests for the human-readable text report."""

from __future__ import annotations

from char_audit.core.scanner import detect_invisible_characters
from char_audit.model.detection import Detection
from char_audit.reports.text import (
    NO_DETECTIONS_MESSAGE,
    format_detection,
    format_text_output,
)


def _det(file: str, line: int, byte_offset: int, code: int = 0x200B) -> Detection:
    return Detection(
        file=file,
        line=line,
        byte_offset=byte_offset,
        char_index=1,
        char=chr(code),
        code=code,
        name="ZERO WIDTH SPACE",
        description="Invisible character used to hide code",
    )


class TestFormatTextOutput:
    def test_empty(self):
        assert format_text_output([]) == NO_DETECTIONS_MESSAGE

    def test_files_sorted_detections_keep_scan_order(self):
        detections = [
            _det("src/z.js", 3, 40),
            _det("src/a.js", 9, 90),
            _det("src/z.js", 1, 2),
            _det("src/a.js", 2, 10),
        ]
        out = format_text_output(detections)
        lines = out.splitlines()

        assert lines[0] == "Found 4 suspicious character(s):"
        assert lines[2] == "src/a.js"
        assert lines[3].startswith("    Line 9:1 (byte 90)")
        assert lines[5].startswith("    Line 2:1 (byte 10)")
        assert lines[8] == "src/z.js"
        assert lines[9].startswith("    Line 3:1 (byte 40)")
        assert lines[11].startswith("    Line 1:1 (byte 2)")
        assert out.endswith("\n\n")

    def test_each_group_followed_by_blank_line(self):
        out = format_text_output([_det("a", 1, 1), _det("b", 1, 1)])
        assert "  Invisible character used to hide code\n\nb\n" in out


class TestFormatDetection:
    def test_layout(self):
        d = detect_invisible_characters("ab\n\tx\U00100001", "f.txt")[0]
        assert format_detection(d) == (
            "    Line 2:3 (byte 6) - PRIVATE USE AREA (U+100001)\n"
            "  Private use character (U+100001) - commonly used for payload hiding\n"
        )

    def test_code_point_padded(self):
        d = detect_invisible_characters("\x01", "f.txt")[0]
        assert "(U+0001)" in format_detection(d)
