"""Dropdown widget."""

from typing import Any, Dict, List

from widgetlink.core import get_logger
from widgetlink.registry import Handler
from .base import Widget

logger = get_logger(__name__)


class DropdownWidget(Widget):
    """
    Single-choice selector over labelled options.

    State is a property bag with value, selected_value and selected_text;
    selected_text is the label of the chosen option, "" when none matches.
    """

    type_name = "dropdown"

    @property
    def options(self) -> List[Dict[str, Any]]:
        return list(self.props.get("options") or [])

    def label_for(self, value: Any) -> str:
        for option in self.options:
            if option.get("value") == value:
                return option.get("label", "")
        return ""

    def handlers(self) -> Dict[str, Handler]:
        return {"setValue": self.set_value}

    def set_value(self, args: Dict[str, Any]) -> None:
        value = args.get("value")
        logger.debug("dropdown_set_value", widget_id=self.id, value=value)
        self._write(value)

    def select(self, value: Any) -> None:
        """Choose an option as a user would and fire onChange."""
        label = self._write(value)
        self.fire(
            "onChange",
            {self.id: {"value": value, "selected_value": value, "selected_text": label}},
        )

    def _write(self, value: Any) -> str:
        label = self.label_for(value)
        self.store.set_property(self.id, "value", value)
        self.store.set_property(self.id, "selected_value", value)
        self.store.set_property(self.id, "selected_text", label)
        return label

    def render(self) -> Dict[str, Any]:
        return {
            "value": self.get("selected_value") or "",
            "placeholder": self.props.get("placeholder"),
            "options": [(o.get("label", ""), o.get("value")) for o in self.options],
        }
