"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from widgetlink.bindings import BindingCompiler
from widgetlink.core import get_settings, Settings
from widgetlink.engine import ExpressionResolver, TriggerDispatcher
from widgetlink.registry import HandlerRegistry
from widgetlink.store import ValueStore


class EngineModule(Module):
    """Binding engine dependencies, one set per page."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings

    @singleton
    @provider
    def provide_store(self) -> ValueStore:
        """Provide the shared value store."""
        return ValueStore()

    @singleton
    @provider
    def provide_registry(self) -> HandlerRegistry:
        """Provide the handler registry."""
        return HandlerRegistry()

    @singleton
    @provider
    def provide_resolver(self, store: ValueStore) -> ExpressionResolver:
        """Provide an expression resolver bound to the page store."""
        return ExpressionResolver(store)

    @singleton
    @provider
    def provide_compiler(self, settings: Settings) -> BindingCompiler:
        """Provide the binding compiler."""
        return BindingCompiler(strict=settings.strict_bindings)

    @singleton
    @provider
    def provide_dispatcher(
        self, resolver: ExpressionResolver, registry: HandlerRegistry, settings: Settings
    ) -> TriggerDispatcher:
        """Provide the trigger dispatcher with all dependencies."""
        return TriggerDispatcher(
            resolver,
            registry,
            serialize_per_target=settings.serialize_async_handlers,
        )


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    return Injector([EngineModule(settings)])
