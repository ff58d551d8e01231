"""Button widget - the trigger for indirect bindings."""

from typing import Any, Dict

from widgetlink.engine import referenced_ids
from .base import Widget


class ButtonWidget(Widget):
    """
    Fires "<id>.onClick". It owns no state and registers no handlers.

    On click it snapshots the stored values of every widget its rules read
    from and passes them along as trigger context.
    """

    type_name = "button"

    def click(self) -> None:
        self.fire("onClick", self.collect_context())

    def collect_context(self) -> Dict[str, Any]:
        """
        Build the trigger context for a click.

        Returns:
            Whole stored values keyed by widget id, for every id referenced
            by an argument of a rule on this button's onClick, excluding the
            button itself and ids with nothing stored
        """
        trigger = f"{self.id}.onClick"
        context: Dict[str, Any] = {}

        for rule in self.rules:
            if rule.trigger != trigger:
                continue
            for action in rule.actions:
                for arg in action.args.values():
                    for source_id in referenced_ids(arg):
                        if source_id == self.id:
                            continue
                        value = self.store.get(source_id)
                        if value is not None:
                            context[source_id] = value

        return context

    def render(self) -> Dict[str, Any]:
        return {"label": self.props.get("label") or self.id}
