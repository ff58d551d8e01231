"""
Engine
Expression resolution and trigger dispatch
"""

from .resolver import ExpressionResolver, referenced_ids, split_reference, to_text
from .dispatcher import TriggerDispatcher

__all__ = [
    "ExpressionResolver",
    "referenced_ids",
    "split_reference",
    "to_text",
    "TriggerDispatcher",
]
