"""Core layer: the value model, its text adapter, and editor glue."""

from datespin.core.adapter import DateTimeTextAdapter
from datespin.core.editor import DateTimeEditor
from datespin.core.model import BoundedSteppableDateTime, Subscription, ValueChange

__all__ = [
    "BoundedSteppableDateTime",
    "DateTimeEditor",
    "DateTimeTextAdapter",
    "Subscription",
    "ValueChange",
]
