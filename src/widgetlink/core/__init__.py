"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    ValidationError,
    ValidationResult,
    PageConfigValidator,
    validate_page_config,
)
from .logging_config import configure_logging, get_logger, LogContext
from .json import (
    parse_json_object,
    safe_json_dumps,
    JSONParseError,
    validate_json_size,
    validate_json_depth,
)
from .id import DispatchID, new_dispatch_id, is_dispatch_id


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "ValidationResult",
    "PageConfigValidator",
    "validate_page_config",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "parse_json_object",
    "safe_json_dumps",
    "JSONParseError",
    "validate_json_size",
    "validate_json_depth",
    # IDs
    "DispatchID",
    "new_dispatch_id",
    "is_dispatch_id",
]
