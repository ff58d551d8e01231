"""Page Config Parser - JSON document to PageConfig with validation."""

from typing import Any, Dict

import pydantic

from widgetlink.core import (
    get_logger,
    get_settings,
    parse_json_object,
    JSONParseError,
    PageConfigValidator,
    safe_json_dumps,
    Settings,
    ValidationError,
)
from .models import PageConfig

logger = get_logger(__name__)


class PageConfigParser:
    """Parses page configuration documents into PageConfig models"""

    def __init__(self, settings: Settings | None = None, repair: bool = False):
        self.settings = settings or get_settings()
        self.repair = repair

    def parse(self, content: str) -> PageConfig:
        """
        Parse a configuration document.

        Args:
            content: JSON content string

        Returns:
            Validated page configuration

        Raises:
            ValidationError: If the document is malformed
        """
        try:
            data = parse_json_object(content, repair=self.repair)
        except JSONParseError as e:
            logger.error("json_parse_failed", error=str(e))
            raise ValidationError(f"Invalid JSON: {e}") from e

        return self.parse_dict(data, content)

    def parse_dict(self, data: Dict[str, Any], content: str = "") -> PageConfig:
        """
        Validate an already decoded document.

        Without the source text, the size limit applies to the document's
        compact JSON encoding.
        """
        if not content:
            try:
                content = safe_json_dumps(data)
            except (TypeError, ValueError) as e:
                raise ValidationError(f"Page config is not JSON-encodable: {e}") from e

        PageConfigValidator.validate(
            data,
            content,
            max_size=self.settings.max_config_size,
            max_depth=self.settings.max_config_depth,
        )

        try:
            config = PageConfig.model_validate(data)
        except pydantic.ValidationError as e:
            logger.error("invalid_page_config", errors=e.error_count())
            raise ValidationError(f"Invalid page config: {e}") from e

        ids = [c.id for c in config.components]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            logger.error("duplicate_component_ids", ids=duplicates)
            raise ValidationError(f"Duplicate component ids: {', '.join(duplicates)}")

        logger.info(
            "page_config_parsed",
            components=len(config.components),
            bindings=len(config.bindings),
        )
        return config


def parse_page_config(content: str, settings: Settings | None = None) -> PageConfig:
    """
    Convenience function to parse a configuration document

    Args:
        content: JSON string

    Returns:
        PageConfig
    """
    parser = PageConfigParser(settings)
    return parser.parse(content)
