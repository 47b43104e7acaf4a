"""Exit-code policy — map a finished scan onto the CLI exit-code contract.

Precedence (first match wins):
  1. strict mode (``fail_on_skip``) with at least one skipped file → ERROR
  2. any detection → VIOLATION
  3. otherwise → SUCCESS

Strict mode is evaluated only after the whole scan has completed and the
results have been rendered; it never stops a scan early.
"""

from __future__ import annotations

from char_audit.model.run_result import ScanResult
from char_audit.utils.exit_codes import ExitCode


def strict_mode_failed(result: ScanResult, *, fail_on_skip: bool) -> bool:
    return fail_on_skip and result.skipped > 0


def exit_code_for_result(result: ScanResult, *, fail_on_skip: bool = False) -> int:
    """Compute the CI exit code for *result*."""
    if strict_mode_failed(result, fail_on_skip=fail_on_skip):
        return ExitCode.ERROR
    if result.has_detections:
        return ExitCode.VIOLATION
    return ExitCode.SUCCESS
