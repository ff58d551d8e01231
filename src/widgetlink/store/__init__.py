"""Shared value store."""

from .values import (
    CANONICAL_PROPERTIES,
    ComponentValue,
    Observer,
    ValueStore,
    is_bag,
    property_of,
)

__all__ = [
    "CANONICAL_PROPERTIES",
    "ComponentValue",
    "Observer",
    "ValueStore",
    "is_bag",
    "property_of",
]
