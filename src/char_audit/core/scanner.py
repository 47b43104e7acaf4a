"""Scanner — single left-to-right pass over one file's decoded text."""

from __future__ import annotations

from char_audit.core.classify import classify
from char_audit.model.detection import Detection


def utf8_width(code: int) -> int:
    """Number of bytes *code* occupies in UTF-8."""
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


def detect_invisible_characters(content: str, file_path: str) -> list[Detection]:
    """Return every suspicious code point in *content*, in file order.

    ``line`` and ``char_index`` follow a plain ``\\n`` line model: a newline
    bumps the line and resets the column, and is never itself classified.
    ``byte_offset`` tracks the UTF-8 position of each character so that
    multi-byte text before a hit does not skew it.

    Occurrences are neither merged nor deduplicated.
    """
    detections: list[Detection] = []

    line = 1
    char_index = 0
    byte_i = 0  # 0-indexed byte position of the current character

    for ch in content:
        code = ord(ch)
        width = utf8_width(code)

        if ch == "\n":
            line += 1
            char_index = 0
            byte_i += width
            continue

        char_index += 1
        hit = classify(code)
        if hit is not None:
            detections.append(
                Detection(
                    file=file_path,
                    line=line,
                    byte_offset=byte_i + 1,
                    char_index=char_index,
                    char=ch,
                    code=code,
                    name=hit.name,
                    description=hit.description,
                )
            )
        byte_i += width

    return detections
