"""Fast, type-safe JSON parsing with multiple backends."""

from typing import Any
import json

import msgspec
import orjson
from json_repair import repair_json

_decoder = msgspec.json.Decoder()


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def strip_code_fences(text: str) -> str:
    """Remove a leading ```lang fence and trailing ``` fence, if present."""
    text = text.strip()
    if text.startswith("```"):
        newline = text.find("\n")
        text = text[newline + 1:] if newline != -1 else text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def decode_json_line(text: str) -> Any:
    """
    Strictly decode one line of JSON.

    No extraction and no repair: a line that is not exactly valid JSON is
    reported as an error so the caller can treat it as prose.

    Raises:
        JSONParseError: If the text is not valid JSON
    """
    try:
        return _decoder.decode(text.encode("utf-8"))
    except (msgspec.DecodeError, UnicodeEncodeError) as e:
        raise JSONParseError(f"Invalid JSON: {e}", e) from e


def extract_json_boundaries(text: str, opener: str = "{", closer: str = "}") -> str | None:
    """
    Extract the outermost JSON container from text.

    Args:
        text: Text potentially containing JSON
        opener: Opening bracket of the container
        closer: Closing bracket of the container

    Returns:
        The extracted JSON text or None if not found
    """
    working_text = text

    # Remove markdown code blocks
    if "```" in working_text:
        if "```json" in working_text:
            start_marker = working_text.find("```json") + 7
        else:
            start_marker = working_text.find("```") + 3

        end_marker = working_text.find("```", start_marker)
        if end_marker != -1:
            working_text = working_text[start_marker:end_marker].strip()

    start = working_text.find(opener)
    end = working_text.rfind(closer)

    if start == -1 or end == -1 or end < start:
        return None

    return working_text[start:end + 1]


def _parse_extracted(json_str: str, expected: type, repair: bool) -> Any:
    try:
        result = _decoder.decode(json_str.encode("utf-8"))
    except (msgspec.DecodeError, UnicodeEncodeError) as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e
        try:
            result = json.loads(repair_json(json_str))
        except Exception as repair_error:
            raise JSONParseError(f"JSON repair failed: {repair_error}", repair_error) from repair_error

    if not isinstance(result, expected):
        raise JSONParseError(f"Expected {expected.__name__}, got {type(result).__name__}")
    return result


def extract_json(text: str, repair: bool = True) -> dict[str, Any]:
    """
    Extract and parse a JSON object from model output.

    Args:
        text: Text containing JSON
        repair: Attempt to repair invalid JSON with json_repair

    Returns:
        Parsed JSON dictionary

    Raises:
        JSONParseError: If parsing fails
    """
    json_str = extract_json_boundaries(text.strip())
    if json_str is None:
        raise JSONParseError("No JSON object found in text")
    return _parse_extracted(json_str, dict, repair)


def extract_json_array(text: str, repair: bool = False) -> list[Any]:
    """
    Extract and parse a JSON array from model output.

    Raises:
        JSONParseError: If no array is found or parsing fails
    """
    json_str = extract_json_boundaries(strip_code_fences(text), "[", "]")
    if json_str is None:
        raise JSONParseError("No JSON array found in text")
    return _parse_extracted(json_str, list, repair)


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent, etc.)

    Returns:
        JSON string
    """
    indent = kwargs.get("indent", 0)

    # Use orjson for compact output (fastest)
    if not indent:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError):
            # Fallback for edge cases (e.g., integers outside 64-bit range)
            pass

    if indent == 2:
        try:
            return orjson.dumps(obj, option=orjson.OPT_INDENT_2).decode("utf-8")
        except (TypeError, ValueError):
            pass

    # Use stdlib for other indents or as fallback (most compatible)
    return json.dumps(obj, indent=indent if indent else None, ensure_ascii=False)


def validate_json_size(data: str | bytes, max_size: int, name: str = "JSON") -> None:
    """
    Validate JSON size to prevent DoS attacks.

    Args:
        data: JSON text to validate
        max_size: Maximum allowed size in bytes
        name: Name for error messages

    Raises:
        JSONParseError: If size exceeds limit
    """
    size = len(data.encode("utf-8", "surrogatepass")) if isinstance(data, str) else len(data)
    if size > max_size:
        raise JSONParseError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = 20, current_depth: int = 0) -> None:
    """
    Validate JSON nesting depth to prevent stack overflow.

    Args:
        obj: Object to validate
        max_depth: Maximum allowed nesting depth
        current_depth: Current depth (internal)

    Raises:
        JSONParseError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise JSONParseError(f"JSON nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_json_depth(item, max_depth, current_depth + 1)
