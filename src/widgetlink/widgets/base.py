"""
Base Widget Implementation
Abstract base class for all headless widgets
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Callable, ClassVar, Dict, Optional

from widgetlink.bindings import Rule
from widgetlink.core import get_logger, get_settings, Settings
from widgetlink.engine import TriggerDispatcher
from widgetlink.registry import Handler, HandlerRegistry
from widgetlink.store import ComponentValue, ValueStore

logger = get_logger(__name__)


class Widget(ABC):
    """
    Abstract base class for widgets.

    A widget keeps its state in the shared store under its own id, registers
    its action handlers at mount and fires "<id>.<event>" triggers on user
    interaction. It never references other widgets directly.
    """

    type_name: ClassVar[str] = ""

    def __init__(
        self,
        widget_id: str,
        props: Optional[Mapping[str, Any]] = None,
        *,
        store: ValueStore,
        registry: HandlerRegistry,
        dispatcher: TriggerDispatcher,
        rules: Sequence[Rule] = (),
        settings: Optional[Settings] = None,
    ):
        self.id = widget_id
        self.props: Dict[str, Any] = dict(props or {})
        self.store = store
        self.registry = registry
        self.dispatcher = dispatcher
        self.rules = rules
        self.settings = settings or get_settings()
        self.rendered: Dict[str, Any] = {}
        self._unsubscribe: Optional[Callable[[], None]] = None

    def handlers(self) -> Dict[str, Handler]:
        """Action handlers to register at mount, keyed by action type."""
        return {}

    @abstractmethod
    def render(self) -> Dict[str, Any]:
        """Current view state derived from the store."""
        pass

    @property
    def mounted(self) -> bool:
        return self._unsubscribe is not None

    @property
    def value(self) -> ComponentValue:
        """Whole stored value of this widget."""
        return self.store.get(self.id)

    def get(self, prop: str) -> ComponentValue:
        """One property of this widget's stored value."""
        return self.store.get_property(self.id, prop)

    def mount(self) -> None:
        """Register handlers and start observing this widget's store entry."""
        if self.mounted:
            return

        for action_type, handler in self.handlers().items():
            self.registry.register(self.id, action_type, handler)

        self._unsubscribe = self.store.subscribe(self.id, self._on_store_change)
        self.rendered = self.render()
        logger.debug("widget_mounted", widget_id=self.id, type=self.type_name)

    def unmount(self) -> None:
        """Stop observing the store. Registered handlers stay in place."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def fire(self, event: str, context: Optional[Mapping[str, Any]] = None) -> None:
        """Fire "<id>.<event>" through the dispatcher."""
        trigger = f"{self.id}.{event}"
        logger.debug("widget_fired", widget_id=self.id, trigger=trigger)
        self.dispatcher.dispatch(trigger, self.rules, context)

    def _on_store_change(self, widget_id: str, value: ComponentValue) -> None:
        self.rendered = self.render()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id!r})"
