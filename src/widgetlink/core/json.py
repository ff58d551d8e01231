"""Fast JSON parsing and encoding with multiple backends."""

from typing import Any
import json

import msgspec
import orjson
from json_repair import repair_json


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def parse_json_object(text: str, repair: bool = False) -> dict[str, Any]:
    """
    Parse a JSON object document.

    Args:
        text: JSON text
        repair: Attempt to repair invalid JSON (trailing commas, missing quotes)

    Returns:
        Parsed JSON dictionary

    Raises:
        JSONParseError: If parsing fails or the document is not an object
    """
    try:
        result = msgspec.json.decode(text.strip().encode("utf-8"))
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e)
        try:
            result = json.loads(repair_json(text))
        except Exception as repair_error:
            raise JSONParseError(f"JSON repair failed: {repair_error}", repair_error)

    if not isinstance(result, dict):
        raise JSONParseError(f"Expected dict, got {type(result).__name__}")
    return result


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

    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError):
            # Fallback for edge cases (e.g., integers outside 64-bit range)
            pass

    return json.dumps(obj, indent=indent if indent > 0 else None, default=str)


def validate_json_size(data: str, max_size: int, name: str = "JSON") -> None:
    """
    Validate JSON size.

    Args:
        data: JSON string to validate
        max_size: Maximum allowed size in bytes
        name: Name for error messages

    Raises:
        JSONParseError: If size exceeds limit
    """
    size = len(data.encode("utf-8"))
    if size > max_size:
        raise JSONParseError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = 20, current_depth: int = 0) -> None:
    """
    Validate JSON nesting depth.

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
