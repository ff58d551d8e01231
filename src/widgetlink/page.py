"""
Page Runtime
Builds and mounts the widgets of one page configuration document.
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional

from injector import Injector

from widgetlink.bindings import (
    BindingCompiler,
    ComponentConfig,
    PageConfig,
    PageConfigParser,
)
from widgetlink.container import create_container
from widgetlink.core import get_logger, Settings, ValidationError
from widgetlink.engine import TriggerDispatcher
from widgetlink.registry import HandlerRegistry
from widgetlink.store import ValueStore
from widgetlink.widgets import WIDGET_TYPES, Widget

logger = get_logger(__name__)


class Page:
    """
    A mounted page.

    Owns one container (store, registry, dispatcher), the compiled rule table
    and one widget per declared component. Widgets are mounted in declaration
    order once all of them exist.
    """

    def __init__(
        self,
        config: PageConfig,
        settings: Optional[Settings] = None,
        container: Optional[Injector] = None,
    ):
        self.config = config
        self.container = container or create_container(settings)
        self.settings = self.container.get(Settings)
        self.store = self.container.get(ValueStore)
        self.registry = self.container.get(HandlerRegistry)
        self.dispatcher = self.container.get(TriggerDispatcher)

        self.rules = self.container.get(BindingCompiler).compile(config.bindings)

        self.widgets: Dict[str, Widget] = {}
        for component in config.components:
            self._add(component)
        for widget in self.widgets.values():
            widget.mount()

        logger.info("page_mounted", widgets=len(self.widgets), rules=len(self.rules))

    @classmethod
    def from_config(cls, data: Mapping[str, Any], settings: Optional[Settings] = None) -> "Page":
        """Build a page from an already decoded configuration document."""
        config = PageConfigParser(settings).parse_dict(dict(data))
        return cls(config, settings=settings)

    @classmethod
    def from_json(cls, content: str, settings: Optional[Settings] = None) -> "Page":
        """
        Build a page from a JSON configuration document.

        Raises:
            ValidationError: If the document is malformed
        """
        config = PageConfigParser(settings).parse(content)
        return cls(config, settings=settings)

    def _add(self, component: ComponentConfig) -> None:
        if component.id in self.widgets:
            raise ValidationError(f"Duplicate component id: {component.id}")

        widget_cls = WIDGET_TYPES.get(component.type)
        if widget_cls is None:
            raise ValidationError(f"Unknown component type: {component.type}")

        self.widgets[component.id] = widget_cls(
            component.id,
            component.props,
            store=self.store,
            registry=self.registry,
            dispatcher=self.dispatcher,
            rules=self.rules,
            settings=self.settings,
        )

    def widget(self, widget_id: str) -> Widget:
        """Get a mounted widget by id."""
        try:
            return self.widgets[widget_id]
        except KeyError:
            raise KeyError(f"No widget with id '{widget_id}' on this page") from None

    def fire(self, trigger: str, context: Optional[Mapping[str, Any]] = None) -> None:
        """Dispatch a trigger against this page's rules."""
        self.dispatcher.dispatch(trigger, self.rules, context)

    async def wait_idle(self) -> None:
        """Wait for background handler work to finish."""
        await self.dispatcher.wait_pending()

    def snapshot(self) -> Dict[str, Any]:
        return self.store.snapshot()

    def close(self) -> None:
        """Unmount every widget."""
        for widget in self.widgets.values():
            widget.unmount()
        logger.info("page_closed", widgets=len(self.widgets))
