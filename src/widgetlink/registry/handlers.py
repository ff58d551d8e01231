"""
Handler Registry
Per-widget, per-action-type callback table
"""

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple

from widgetlink.core import get_logger, ValidationError

logger = get_logger(__name__)

Handler = Callable[[Dict[str, Any]], Any]


class ActionKind(str, Enum):
    """Typed variants of registered handlers."""
    SET_VALUE = "setValue"
    SET_TEXT = "setText"
    CUSTOM = "custom"

    @classmethod
    def of(cls, action_type: str) -> "ActionKind":
        """Classify an action type string."""
        if action_type == cls.SET_VALUE.value:
            return cls.SET_VALUE
        if action_type == cls.SET_TEXT.value:
            return cls.SET_TEXT
        return cls.CUSTOM


@dataclass(frozen=True)
class HandlerEntry:
    """A registered handler and what it was registered for."""
    widget_id: str
    action_type: str
    kind: ActionKind
    callback: Handler
    is_async: bool = False


class HandlerRegistry:
    """
    Capability-style registry keyed by (widget_id, action_type).
    A later registration for the same key replaces the earlier one.
    """

    def __init__(self):
        self._entries: Dict[Tuple[str, str], HandlerEntry] = {}

    def register(self, widget_id: str, action_type: str, handler: Handler) -> HandlerEntry:
        """
        Register a handler for one widget and action type.

        Args:
            widget_id: Widget that owns the handler
            action_type: Action type the handler serves (e.g. "setValue")
            handler: Callable invoked with the resolved argument map

        Returns:
            The stored entry

        Raises:
            ValidationError: If ids are empty or the handler is not callable
        """
        if not isinstance(widget_id, str) or not widget_id.strip():
            raise ValidationError("Handler widget_id must be a non-empty string")
        if not isinstance(action_type, str) or not action_type.strip():
            raise ValidationError(f"Handler action_type for '{widget_id}' must be a non-empty string")
        if not callable(handler):
            raise ValidationError(f"Handler for {widget_id}.{action_type} is not callable")

        entry = HandlerEntry(
            widget_id=widget_id,
            action_type=action_type,
            kind=ActionKind.of(action_type),
            callback=handler,
            is_async=inspect.iscoroutinefunction(handler),
        )

        key = (widget_id, action_type)
        if key in self._entries:
            logger.debug("handler_replaced", widget_id=widget_id, action_type=action_type)
        self._entries[key] = entry

        logger.debug(
            "handler_registered",
            widget_id=widget_id,
            action_type=action_type,
            kind=entry.kind.value,
            is_async=entry.is_async,
        )
        return entry

    def lookup(self, widget_id: str, action_type: str) -> Optional[HandlerEntry]:
        """Get the handler entry for a widget and action type."""
        return self._entries.get((widget_id, action_type))

    def handlers_for(self, widget_id: str) -> List[HandlerEntry]:
        """List all handlers registered by one widget."""
        return [e for (wid, _), e in self._entries.items() if wid == widget_id]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
