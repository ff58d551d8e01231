"""
Bindings
Configuration document models and the binding -> rule compiler
"""

from .models import (
    Action,
    BindingDescriptor,
    BindingMode,
    ComponentConfig,
    ComponentType,
    PageConfig,
    Rule,
)
from .compiler import BindingCompiler, compile_bindings, validate_bindings
from .parser import PageConfigParser, parse_page_config

__all__ = [
    "Action",
    "BindingDescriptor",
    "BindingMode",
    "ComponentConfig",
    "ComponentType",
    "PageConfig",
    "Rule",
    "BindingCompiler",
    "compile_bindings",
    "validate_bindings",
    "PageConfigParser",
    "parse_page_config",
]
