"""Textbox widget."""

from typing import Any, Dict

from widgetlink.core import get_logger
from widgetlink.registry import Handler
from .base import Widget

logger = get_logger(__name__)


class TextboxWidget(Widget):
    """Free-text input whose value and text properties are kept in sync."""

    type_name = "textbox"

    def handlers(self) -> Dict[str, Handler]:
        return {"setValue": self.set_value, "setText": self.set_text}

    def set_value(self, args: Dict[str, Any]) -> None:
        value = args.get("value")
        logger.debug("textbox_set_value", widget_id=self.id, value=value)
        self._write(value)

    def set_text(self, args: Dict[str, Any]) -> None:
        text = args.get("text")
        logger.debug("textbox_set_text", widget_id=self.id, text=text)
        self._write(text)

    def type_text(self, text: str) -> None:
        """Replace the contents as a user would and fire onChange."""
        self._write(text)
        self.fire("onChange", {self.id: {"value": text, "text": text}})

    def _write(self, text: Any) -> None:
        self.store.set_property(self.id, "value", text)
        self.store.set_property(self.id, "text", text)

    def render(self) -> Dict[str, Any]:
        return {
            "value": self.get("value") or "",
            "placeholder": self.props.get("placeholder"),
        }
