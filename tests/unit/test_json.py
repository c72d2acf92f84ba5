"""JSON helper tests with property-based testing."""

import pytest
import json
from hypothesis import given, strategies as st

from spec_stream.core import (
    JSONParseError,
    decode_json_line,
    extract_json,
    extract_json_array,
    safe_json_dumps,
    strip_code_fences,
    validate_json_depth,
    validate_json_size,
)


pytestmark = pytest.mark.unit


def test_decode_json_line():
    """Test strict line decoding."""
    assert decode_json_line('{"op":"add"}') == {"op": "add"}
    assert decode_json_line("[1]") == [1]
    with pytest.raises(JSONParseError):
        decode_json_line('{"op":"add",}')
    with pytest.raises(JSONParseError):
        decode_json_line('Sure! {"op":"add"}')


def test_strip_code_fences():
    """Test fence removal."""
    assert strip_code_fences('```json\n[1, 2]\n```') == "[1, 2]"
    assert strip_code_fences("  [1]  ") == "[1]"


def test_extract_json_with_markdown():
    """Test extracting JSON from markdown code blocks."""
    text = '''Here are the changes:
```json
{"patches": [], "summary": "none"}
```
Done!'''
    assert extract_json(text) == {"patches": [], "summary": "none"}


def test_extract_json_with_extra_text():
    """Test extracting JSON with surrounding text."""
    assert extract_json('before {"a": 1} after') == {"a": 1}


def test_extract_json_invalid():
    """Test error on text without JSON."""
    with pytest.raises(JSONParseError):
        extract_json("This has no JSON", repair=False)


def test_extract_json_array():
    """Test array extraction."""
    assert extract_json_array('Plan:\n[{"key": "hero"}]') == [{"key": "hero"}]
    with pytest.raises(JSONParseError):
        extract_json_array('{"key": "hero"}')


def test_safe_json_dumps_with_indent():
    """Test JSON serialization with indentation."""
    obj = {"title": "Test"}
    result = safe_json_dumps(obj, indent=2)
    assert json.loads(result) == obj
    assert "\n" in result


def test_safe_json_dumps_big_int():
    """Test the fallback for integers orjson cannot encode."""
    assert json.loads(safe_json_dumps({"n": 2 ** 70})) == {"n": 2 ** 70}


def test_validate_json_size():
    """Test the size limit counts encoded bytes."""
    validate_json_size("é" * 5, 10)
    with pytest.raises(JSONParseError):
        validate_json_size("é" * 6, 10)


def test_validate_json_depth():
    """Test the nesting limit."""
    validate_json_depth({"a": [1]}, max_depth=2)
    with pytest.raises(JSONParseError):
        validate_json_depth({"a": [[1]]}, max_depth=2)


@given(st.dictionaries(st.text(min_size=1), st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1)))
def test_json_roundtrip(data):
    """Property test: JSON serialization roundtrip."""
    assert decode_json_line(safe_json_dumps(data)) == data


def test_decode_json_line_lone_surrogate():
    """Test unencodable text is a parse error, not a crash."""
    with pytest.raises(JSONParseError):
        decode_json_line('{"op": "add", "path": "/state/x", "value": "\ud800"}')
    validate_json_size("\ud800", 3)
