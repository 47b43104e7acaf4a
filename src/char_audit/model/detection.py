"""Detection — one suspicious code point occurrence inside one file."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Detection:
    """Immutable, schema-aligned detection record.

    Corresponds to one item of ``detections.schema.json``.  All coordinates
    are 1-indexed:

    * ``line`` counts ``\\n`` boundaries only (a lone ``\\r`` is not one).
    * ``byte_offset`` is the first byte of the character in the file's
      UTF-8 encoding.
    * ``char_index`` counts characters since the most recent ``\\n``.
    """

    file: str
    line: int
    byte_offset: int
    char_index: int
    char: str
    code: int
    name: str
    description: str

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "file": self.file,
            "line": self.line,
            "byte_offset": self.byte_offset,
            "char_index": self.char_index,
            "char": self.char,
            "code": self.code,
            "name": self.name,
            "description": self.description,
        }
