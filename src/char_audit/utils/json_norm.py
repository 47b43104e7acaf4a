"""Canonical JSON serialization — single dump path for CLI output.

Guarantees:
  - Pretty output (``indent=2``) with a trailing newline
  - Non-ASCII characters written verbatim, so invisible characters survive
    as themselves in the ``char`` field
  - Key order preserved; records are emitted in field order
"""

from __future__ import annotations

import json
from typing import Any


def stable_json_dumps(obj: Any, *, indent: int | None = 2) -> str:
    """Serialize *obj* to JSON text ending in a newline.

    Raises ``TypeError`` for values with no JSON representation.
    """
    s = json.dumps(obj, indent=indent, ensure_ascii=False)
    return s + "\n"
