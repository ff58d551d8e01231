"""Calendar widget - a date input holding a scalar value."""

from typing import Any, Dict

from widgetlink.registry import Handler
from .base import Widget


class CalendarWidget(Widget):
    type_name = "calendar"

    def handlers(self) -> Dict[str, Handler]:
        return {"setValue": self.set_value}

    def set_value(self, args: Dict[str, Any]) -> None:
        self.store.set(self.id, args.get("value"))

    def pick(self, date: str) -> None:
        """Pick a date (ISO "YYYY-MM-DD") and fire onChange."""
        self.store.set(self.id, date)
        self.fire("onChange", {self.id: {"value": date}})

    def render(self) -> Dict[str, Any]:
        return {"value": self.value or ""}
