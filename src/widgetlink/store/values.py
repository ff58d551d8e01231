"""Shared value store - per-widget component values with property bags."""

from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional

from widgetlink.core import get_logger

logger = get_logger(__name__)

# Properties that alias the whole value of a scalar entry
CANONICAL_PROPERTIES = frozenset({"value", "selected_value", "text"})

ComponentValue = Any
Observer = Callable[[str, ComponentValue], None]


def is_bag(value: Any) -> bool:
    """Check whether a stored value is a property bag (lists are not bags)."""
    return isinstance(value, Mapping)


def property_of(value: ComponentValue, prop: Optional[str]) -> ComponentValue:
    """
    Read a property from a bare component value.

    Args:
        value: Stored component value (scalar, bag or None)
        prop: Property name; empty or None selects the whole value

    Returns:
        The property value, the whole value for a canonical alias on a
        non-bag entry, or None when absent
    """
    if not prop:
        return value

    if is_bag(value):
        return value.get(prop)

    if prop in CANONICAL_PROPERTIES:
        return value

    return None


class ValueStore:
    """
    Mapping from widget id to component value.

    Entries are created on first write and never removed. Writers and readers
    hold an explicit reference to the store; there is no module-level instance.
    """

    def __init__(self, initial: Optional[Mapping[str, ComponentValue]] = None):
        self._values: Dict[str, ComponentValue] = dict(initial or {})
        self._observers: Dict[str, List[Observer]] = {}

    def get(self, widget_id: str) -> ComponentValue:
        """Get the whole stored value, or None if never written."""
        return self._values.get(widget_id)

    def set(self, widget_id: str, value: ComponentValue) -> None:
        """
        Overwrite the whole stored value.

        Unlike set_property this does not merge: a bag previously built by
        set_property is replaced wholesale.
        """
        self._values[widget_id] = value
        self._notify(widget_id, value)

    def get_property(self, widget_id: str, prop: Optional[str]) -> ComponentValue:
        """Read one property of a widget's value with canonical-alias fallback."""
        return property_of(self._values.get(widget_id), prop)

    def set_property(self, widget_id: str, prop: str, new_value: ComponentValue) -> None:
        """
        Write one property, upgrading a scalar entry to a property bag.

        Existing bag keys are always kept. A defined scalar is preserved under
        'value' unless the write targets 'value' itself.
        """
        old = self._values.get(widget_id)

        if is_bag(old):
            updated = dict(old)
        else:
            updated = {}
            if old is not None and prop != "value":
                updated["value"] = old

        updated[prop] = new_value
        self.set(widget_id, updated)

    def subscribe(self, widget_id: str, observer: Observer) -> Callable[[], None]:
        """
        Observe writes to one widget id.

        Args:
            widget_id: Widget to observe
            observer: Called with (widget_id, new_value) after each write

        Returns:
            Function that removes the observer
        """
        observers = self._observers.setdefault(widget_id, [])
        observers.append(observer)

        def unsubscribe() -> None:
            if observer in observers:
                observers.remove(observer)

        return unsubscribe

    def _notify(self, widget_id: str, value: ComponentValue) -> None:
        for observer in list(self._observers.get(widget_id, ())):
            try:
                observer(widget_id, value)
            except Exception as e:
                logger.error("observer_failed", widget_id=widget_id, error=str(e), exc_info=True)

    def snapshot(self) -> Dict[str, ComponentValue]:
        """Shallow copy of all entries."""
        return dict(self._values)

    def __contains__(self, widget_id: object) -> bool:
        return widget_id in self._values

    def __len__(self) -> int:
        return len(self._values)
