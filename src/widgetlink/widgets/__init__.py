"""
Headless Widgets
Widget types that can appear on a page, keyed by their config type name
"""

from typing import Dict, Type

from .base import Widget
from .button import ButtonWidget
from .calendar import CalendarWidget
from .chart import ChartWidget
from .dropdown import DropdownWidget
from .textbox import TextboxWidget

WIDGET_TYPES: Dict[str, Type[Widget]] = {
    cls.type_name: cls
    for cls in (ButtonWidget, CalendarWidget, ChartWidget, DropdownWidget, TextboxWidget)
}

__all__ = [
    "Widget",
    "ButtonWidget",
    "CalendarWidget",
    "ChartWidget",
    "DropdownWidget",
    "TextboxWidget",
    "WIDGET_TYPES",
]
