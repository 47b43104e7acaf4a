"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — no suspicious characters found
  1   Violation — suspicious characters detected (fail the CI job)
  2   Error — invalid pattern, serialization failure, or skips in strict mode
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
