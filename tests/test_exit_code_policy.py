"""Exit-code policy tests — strict mode beats detections beats success."""

from __future__ import annotations

import pytest

from char_audit.core.scanner import detect_invisible_characters
from char_audit.model.run_result import ScanResult
from char_audit.policy.exit_codes import exit_code_for_result, strict_mode_failed
from char_audit.utils.exit_codes import ExitCode


def _result(*, detections: bool, skipped: int) -> ScanResult:
    found = detect_invisible_characters("\u200b", "f.txt") if detections else []
    return ScanResult(detections=found, scanned=1, skipped=skipped)


class TestExitCodeEnum:
    def test_values_are_frozen(self):
        assert ExitCode.SUCCESS == 0
        assert ExitCode.VIOLATION == 1
        assert ExitCode.ERROR == 2


class TestExitCodeForResult:
    @pytest.mark.parametrize(
        "detections, skipped, fail_on_skip, expected",
        [
            (False, 0, False, ExitCode.SUCCESS),
            (False, 3, False, ExitCode.SUCCESS),
            (True, 0, False, ExitCode.VIOLATION),
            (True, 3, False, ExitCode.VIOLATION),
            (False, 0, True, ExitCode.SUCCESS),
            (True, 0, True, ExitCode.VIOLATION),
            (False, 1, True, ExitCode.ERROR),
            (True, 1, True, ExitCode.ERROR),
        ],
    )
    def test_matrix(self, detections: bool, skipped: int, fail_on_skip: bool, expected: int):
        result = _result(detections=detections, skipped=skipped)
        assert exit_code_for_result(result, fail_on_skip=fail_on_skip) == expected

    def test_no_matches_is_success(self):
        empty = ScanResult()
        assert empty.no_matches
        assert exit_code_for_result(empty, fail_on_skip=True) == ExitCode.SUCCESS


class TestStrictModeFailed:
    def test_requires_both_flag_and_skips(self):
        assert strict_mode_failed(_result(detections=False, skipped=1), fail_on_skip=True)
        assert not strict_mode_failed(_result(detections=False, skipped=1), fail_on_skip=False)
        assert not strict_mode_failed(_result(detections=False, skipped=0), fail_on_skip=True)
