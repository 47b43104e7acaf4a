"""Tests for the JSON output contract and canonical serialization."""

from __future__ import annotations

import jsonschema
import pytest

from char_audit.contracts.load import (
    DETECTIONS_SCHEMA,
    load_schema,
    validate_detections,
    validate_instance,
)
from char_audit.core.scanner import detect_invisible_characters
from char_audit.utils.json_norm import stable_json_dumps


def _records(text: str) -> list[dict]:
    return [d.to_dict() for d in detect_invisible_characters(text, "f.txt")]


class TestDetectionsSchema:
    def test_schema_loads(self):
        schema = load_schema(DETECTIONS_SCHEMA)
        assert schema["type"] == "array"
        jsonschema.Draft202012Validator.check_schema(schema)

    def test_scanner_output_is_valid(self):
        validate_detections(_records("a\u200b\n\x00\uf8ff\ufeff"))

    def test_empty_list_is_valid(self):
        validate_instance([], DETECTIONS_SCHEMA)

    def test_missing_field_rejected(self):
        record = _records("\u200b")[0]
        del record["byte_offset"]
        with pytest.raises(jsonschema.ValidationError):
            validate_detections([record])

    def test_zero_coordinates_rejected(self):
        record = _records("\u200b")[0]
        record["char_index"] = 0
        with pytest.raises(jsonschema.ValidationError):
            validate_detections([record])

    def test_unknown_field_rejected(self):
        record = _records("\u200b")[0]
        record["severity"] = "high"
        with pytest.raises(jsonschema.ValidationError):
            validate_detections([record])


class TestStableJsonDumps:
    def test_trailing_newline_and_indent(self):
        s = stable_json_dumps([{"a": 1}])
        assert s.endswith("\n")
        assert s == '[\n  {\n    "a": 1\n  }\n]\n'

    def test_non_ascii_kept_verbatim(self):
        s = stable_json_dumps({"char": "\u200b"})
        assert "\u200b" in s
        assert "\\u200b" not in s

    def test_key_order_preserved(self):
        records = _records("\u200b")
        s = stable_json_dumps(records)
        assert s.index('"file"') < s.index('"line"') < s.index('"description"')

    def test_unserializable_raises_type_error(self):
        with pytest.raises(TypeError):
            stable_json_dumps({"x": object()})
