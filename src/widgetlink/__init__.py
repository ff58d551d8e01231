"""
widgetlink
Declarative trigger -> rule -> action wiring between decoupled widgets
"""

from widgetlink.bindings import (
    Action,
    BindingCompiler,
    BindingDescriptor,
    PageConfig,
    Rule,
    compile_bindings,
    parse_page_config,
)
from widgetlink.container import create_container
from widgetlink.core import Settings, ValidationError, get_settings
from widgetlink.engine import ExpressionResolver, TriggerDispatcher
from widgetlink.page import Page
from widgetlink.registry import ActionKind, HandlerEntry, HandlerRegistry
from widgetlink.store import ValueStore

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionKind",
    "BindingCompiler",
    "BindingDescriptor",
    "ExpressionResolver",
    "HandlerEntry",
    "HandlerRegistry",
    "Page",
    "PageConfig",
    "Rule",
    "Settings",
    "TriggerDispatcher",
    "ValidationError",
    "ValueStore",
    "compile_bindings",
    "create_container",
    "get_settings",
    "parse_page_config",
]
