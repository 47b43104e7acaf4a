"""Rendering of scan results for humans and machines."""

from char_audit.reports.text import format_detection, format_text_output

__all__ = ["format_detection", "format_text_output"]
