"""
Handler Registry
Maps (widget id, action type) to the widget's callback
"""

from .handlers import ActionKind, Handler, HandlerEntry, HandlerRegistry

__all__ = [
    "ActionKind",
    "Handler",
    "HandlerEntry",
    "HandlerRegistry",
]
