"""Input validation with strong typing and the Result pattern."""

from dataclasses import dataclass
from typing import Any
from returns.result import Result, Success, Failure

from .json import validate_json_size, validate_json_depth, JSONParseError


MAX_CONFIG_SIZE = 512 * 1024  # 512KB
MAX_JSON_DEPTH = 20


class ValidationError(Exception):
    """Validation failed."""

    pass


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None


class PageConfigValidator:
    """Validates page configuration documents before model parsing."""

    @staticmethod
    def validate(
        data: dict[str, Any],
        json_str: str,
        max_size: int = MAX_CONFIG_SIZE,
        max_depth: int = MAX_JSON_DEPTH,
    ) -> None:
        """
        Validate a decoded configuration document.

        Args:
            data: Decoded document
            json_str: JSON string representation
            max_size: Maximum document size in bytes
            max_depth: Maximum nesting depth

        Raises:
            ValidationError: If validation fails
        """
        try:
            validate_json_size(json_str, max_size, "Page config")
            validate_json_depth(data, max_depth)
        except JSONParseError as e:
            raise ValidationError(str(e)) from e

        for section in ("components", "bindings"):
            if section not in data:
                raise ValidationError(f"Page config missing required '{section}' field")
            if not isinstance(data[section], list):
                raise ValidationError(f"Page config '{section}' must be a list")


def validate_page_config(
    data: dict[str, Any], json_str: str
) -> Result[None, ValidationResult]:
    """
    Validate a configuration document (Result pattern version).

    Args:
        data: Decoded document
        json_str: JSON string representation

    Returns:
        Result indicating success or validation error
    """
    try:
        PageConfigValidator.validate(data, json_str)
        return Success(None)
    except ValidationError as e:
        return Failure(ValidationResult(str(e)))
