"""Shared utilities for char_audit."""

from char_audit.utils.exit_codes import ExitCode
from char_audit.utils.json_norm import stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dumps",
]
