"""File discovery — glob expansion, path filtering and file reading.

The collector only talks to a :class:`FileSource`, so the scanner, the
classifier and the path filter stay testable without touching the disk.
"""

from __future__ import annotations

import glob
import os
import re
from pathlib import Path
from typing import Protocol

from char_audit.errors import InvalidPatternError

# Always skipped, whatever the flags say.
IGNORED_DIRS = frozenset(
    {
        "node_modules",
        ".git",
        ".cargo",
        "target",
        ".vscode",
    }
)

# Build output; skipped unless ``scan_bundles`` is set.  Bundled editor
# extensions usually ship their JS from dist/ or out/, so those callers
# want them scanned.
BUNDLE_DIRS = frozenset(
    {
        "dist",
        "build",
        "out",
        ".next",
        ".nuxt",
    }
)

_SEPARATORS = re.compile(r"[/\\]")


def path_components(path: str) -> list[str]:
    """Split *path* on both ``/`` and ``\\`` (Windows-style paths included)."""
    return _SEPARATORS.split(path)


def display_path(path: str) -> str:
    """Printable form of *path*: undecodable filename bytes become U+FFFD.

    ``glob`` hands back such bytes as lone surrogates, which no output
    stream can encode.  Reading must still use the original string.
    """
    return os.fsencode(path).decode("utf-8", "replace")


def should_ignore_path(path: str, scan_bundles: bool) -> bool:
    """Return True if *path* must not be scanned.

    Matching is per component, so ``my-dist-notes.txt`` or ``targets/``
    are never caught by the ``dist`` / ``target`` rules.
    """
    components = path_components(path)
    if any(part in IGNORED_DIRS for part in components):
        return True
    if not scan_bundles and any(part in BUNDLE_DIRS for part in components):
        return True
    return False


def validate_pattern(pattern: str) -> None:
    """Reject glob syntax that a strict glob engine refuses to compile.

    Raises
    ------
    InvalidPatternError
        * three or more consecutive ``*``;
        * ``**`` that is not an entire path component;
        * a ``[`` character class with no closing ``]``.
    """
    n = len(pattern)
    i = 0
    while i < n:
        ch = pattern[i]
        if ch == "*":
            run = 1
            while i + run < n and pattern[i + run] == "*":
                run += 1
            if run > 2:
                raise InvalidPatternError(
                    pattern, "wildcards are either regular `*` or recursive `**`"
                )
            if run == 2:
                before_ok = i == 0 or pattern[i - 1] in "/\\"
                after = i + 2
                after_ok = after == n or pattern[after] in "/\\"
                if not (before_ok and after_ok):
                    raise InvalidPatternError(
                        pattern, "recursive wildcards must form a single path component"
                    )
            i += run
            continue
        if ch == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            # A leading ']' is a literal member of the class.
            if j < n and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close == -1:
                raise InvalidPatternError(pattern, "invalid range pattern")
            i = close + 1
            continue
        i += 1


class FileSource(Protocol):
    """Narrow filesystem contract the collector depends on."""

    def expand(self, pattern: str) -> list[str]:
        """Return candidate path strings for *pattern*, in discovery order."""
        ...

    def read_text(self, path: str) -> str:
        """Return the content of *path* decoded as UTF-8.

        Raises ``OSError`` or ``UnicodeDecodeError`` when the file cannot
        be read or is not valid UTF-8.
        """
        ...


class LocalFileSource:
    """:class:`FileSource` backed by the real filesystem."""

    def expand(self, pattern: str) -> list[str]:
        validate_pattern(pattern)
        # Hidden entries are matched so that ignored dirs such as .git are
        # counted as skips rather than silently dropped.
        return sorted(glob.glob(pattern, recursive=True, include_hidden=True))

    def read_text(self, path: str) -> str:
        # Decode the raw bytes: text-mode reads would fold \r\n into \n and
        # shift every byte offset after it.
        return Path(path).read_bytes().decode("utf-8")
