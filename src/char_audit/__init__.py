"""char_audit — find invisible and deceptive Unicode in source files."""

__all__ = [
    "__version__",
    "classify",
    "detect_invisible_characters",
    "scan_files",
    "scan_pattern",
    "should_ignore_path",
]
__version__ = "0.1.0"

from char_audit.api import scan_pattern  # noqa: E402, F401
from char_audit.core.classify import classify  # noqa: E402, F401
from char_audit.core.discover import should_ignore_path  # noqa: E402, F401
from char_audit.core.runner import scan_files  # noqa: E402, F401
from char_audit.core.scanner import detect_invisible_characters  # noqa: E402, F401
