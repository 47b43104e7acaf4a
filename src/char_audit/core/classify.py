"""Classifier — map a Unicode scalar value to a suspicious-character label.

Three sources are consulted, in this order, and the first hit wins:

1. ``SUSPICIOUS_CHARS`` — hand-picked code points with a fixed name and
   rationale (zero-width, bidi controls, directional marks, variation
   selectors, separators, blank-rendering and non-ASCII whitespace).
2. Private Use Area ranges.
3. C0/C1 control characters, excluding TAB, LF and CR.

The sources never overlap, so the order only matters for clarity.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True, slots=True)
class Classification:
    """Name and rationale attached to a flagged code point."""

    name: str
    description: str


PRIVATE_USE_NAME = "PRIVATE USE AREA"
CONTROL_CHAR_NAME = "CONTROL CHARACTER"

# Inclusive ranges, kept exactly as published.  The middle range has its
# upper bound below its lower bound (0xFFFD < 0xF0000), so it matches
# nothing and plane-15 private use characters are not flagged.
PRIVATE_USE_RANGES: tuple[tuple[int, int], ...] = (
    (0xE000, 0xF8FF),
    (0xF0000, 0xFFFD),
    (0x100000, 0x10FFFD),
)

_ALLOWED_C0 = frozenset({0x0009, 0x000A, 0x000D})  # TAB, LF, CR

_INVISIBLE = "Can alter code logic invisibly"
_BIDI_CONTROL = "Bidi control; can mislead code review"
_BIDI_OVERRIDE = "Bidi override; can reorder displayed code"
_BIDI_ISOLATE = "Bidi isolate; can affect display order"
_DIRECTIONAL_MARK = "Invisible directional marker"
_VARIATION = "Can modify character appearance"
_SEPARATOR = "Can break parsing/tokenization"
_WHITESPACE = "Non-ASCII whitespace; may bypass naive filters"


def _build_table() -> Mapping[int, Classification]:
    table: dict[int, Classification] = {
        # ── zero-width / joiners ────────────────────────────────────
        0x200B: Classification("ZERO WIDTH SPACE", "Invisible character used to hide code"),
        0x200C: Classification("ZERO WIDTH NON-JOINER", _INVISIBLE),
        0x200D: Classification("ZERO WIDTH JOINER", _INVISIBLE),
        0x2060: Classification("WORD JOINER", "Invisible joiner; often used to hide payloads"),
        0xFEFF: Classification("ZERO WIDTH NO-BREAK SPACE", "BOM or invisible space"),
        # ── bidi embeddings / overrides ─────────────────────────────
        0x202A: Classification("LEFT-TO-RIGHT EMBEDDING", _BIDI_CONTROL),
        0x202B: Classification("RIGHT-TO-LEFT EMBEDDING", _BIDI_CONTROL),
        0x202C: Classification(
            "POP DIRECTIONAL FORMATTING",
            "Bidi control; terminates embeddings/overrides",
        ),
        0x202D: Classification("LEFT-TO-RIGHT OVERRIDE", _BIDI_OVERRIDE),
        0x202E: Classification("RIGHT-TO-LEFT OVERRIDE", _BIDI_OVERRIDE),
        # ── bidi isolates ───────────────────────────────────────────
        0x2066: Classification("LEFT-TO-RIGHT ISOLATE", _BIDI_ISOLATE),
        0x2067: Classification("RIGHT-TO-LEFT ISOLATE", _BIDI_ISOLATE),
        0x2068: Classification("FIRST STRONG ISOLATE", _BIDI_ISOLATE),
        0x2069: Classification("POP DIRECTIONAL ISOLATE", "Bidi isolate terminator"),
        # ── directional marks ───────────────────────────────────────
        0x200E: Classification("LEFT-TO-RIGHT MARK", _DIRECTIONAL_MARK),
        0x200F: Classification("RIGHT-TO-LEFT MARK", _DIRECTIONAL_MARK),
        0x061C: Classification("ARABIC LETTER MARK", _DIRECTIONAL_MARK),
        # ── line / paragraph separators ─────────────────────────────
        0x2028: Classification("LINE SEPARATOR", _SEPARATOR),
        0x2029: Classification("PARAGRAPH SEPARATOR", _SEPARATOR),
        # ── renders blank in many fonts ─────────────────────────────
        0x3164: Classification(
            "HANGUL FILLER",
            "Often renders as blank; used for obfuscation",
        ),
        0x00AD: Classification(
            "SOFT HYPHEN",
            "Invisible in most contexts; used for obfuscation",
        ),
        # ── looks like a space, isn't one ───────────────────────────
        0x00A0: Classification("NO-BREAK SPACE", _WHITESPACE),
        0x202F: Classification("NARROW NO-BREAK SPACE", _WHITESPACE),
        0x2007: Classification("FIGURE SPACE", _WHITESPACE),
    }
    # Variation selectors are numbered by offset from U+FE00.
    for offset in range(16):
        table[0xFE00 + offset] = Classification(
            f"VARIATION SELECTOR-{offset}", _VARIATION
        )
    return MappingProxyType(table)


SUSPICIOUS_CHARS: Mapping[int, Classification] = _build_table()


def format_code_point(code: int) -> str:
    """Render *code* as ``U+XXXX`` (uppercase, at least four hex digits)."""
    return f"U+{code:04X}"


def is_private_use_area(code: int) -> bool:
    return any(lo <= code <= hi for lo, hi in PRIVATE_USE_RANGES)


def is_suspicious_control_char(code: int) -> bool:
    """C0 controls other than TAB/LF/CR, plus DEL and the C1 block."""
    if code <= 0x001F:
        return code not in _ALLOWED_C0
    return 0x007F <= code <= 0x009F


def classify(code: int) -> Classification | None:
    """Return the classification for *code*, or ``None`` if it is benign."""
    known = SUSPICIOUS_CHARS.get(code)
    if known is not None:
        return known
    if is_private_use_area(code):
        return Classification(
            PRIVATE_USE_NAME,
            f"Private use character ({format_code_point(code)})"
            " - commonly used for payload hiding",
        )
    if is_suspicious_control_char(code):
        return Classification(
            CONTROL_CHAR_NAME,
            f"Suspicious control character ({format_code_point(code)})",
        )
    return None
