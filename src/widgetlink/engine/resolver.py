"""
Expression Resolver
Expands ${id} and ${id.property} tokens in action arguments.

Lookup is two-tier: the immediate context supplied by the firing widget is
consulted first, the shared value store second. Anything still missing
becomes the empty string.
"""

import re
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from widgetlink.core import get_logger, safe_json_dumps
from widgetlink.monitoring import metrics_collector
from widgetlink.store import ValueStore, property_of

logger = get_logger(__name__)

TOKEN_PATTERN = re.compile(r"\$\{([^}]+)\}")

Context = Mapping[str, Any]


def split_reference(expression: str) -> tuple[str, Optional[str]]:
    """Split a token body into (widget_id, property); extra segments are ignored."""
    parts = expression.split(".")
    return parts[0], parts[1] if len(parts) > 1 else None


def referenced_ids(value: Any) -> List[str]:
    """List widget ids referenced by tokens in an argument value, in order."""
    if not isinstance(value, str):
        return []
    return [split_reference(m.group(1))[0] for m in TOKEN_PATTERN.finditer(value)]


def to_text(value: Any) -> str:
    """Stringify a resolved value for substitution into a template."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (Mapping, list, tuple)):
        return safe_json_dumps(value)
    return str(value)


class ExpressionResolver:
    """Resolves argument templates against a context and a value store."""

    def __init__(self, store: ValueStore):
        self.store = store

    def lookup(self, expression: str, context: Optional[Context] = None) -> Any:
        """
        Resolve one token body to a raw value.

        Returns:
            The referenced value, or None when neither tier has it
        """
        widget_id, prop = split_reference(expression)

        if context is not None and context.get(widget_id) is not None:
            resolved = property_of(context[widget_id], prop)
            if resolved is not None:
                return resolved

        return self.store.get_property(widget_id, prop)

    def resolve(self, value: Any, context: Optional[Context] = None) -> Any:
        """
        Expand every token in a string argument.

        Args:
            value: Argument value; non-strings pass through unchanged
            context: Immediate per-dispatch values keyed by widget id

        Returns:
            Expanded string, or the original non-string value
        """
        if not isinstance(value, str):
            return value

        def substitute(match: re.Match) -> str:
            resolved = self.lookup(match.group(1), context)
            if resolved is None:
                metrics_collector.record_unresolved()
                logger.debug("unresolved_reference", token=match.group(0))
            return to_text(resolved)

        return TOKEN_PATTERN.sub(substitute, value)

    def resolve_args(
        self, args: Optional[Mapping[str, Any]], context: Optional[Context] = None
    ) -> Dict[str, Any]:
        """Expand every entry of an action's argument map into a new dict."""
        return {key: self.resolve(value, context) for key, value in (args or {}).items()}
