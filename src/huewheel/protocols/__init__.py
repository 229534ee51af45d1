"""Events and observer protocols for the picker widgets."""

from .events import ColorEvent, UpdateOrigin
from .observers import ColorObserver

__all__ = [
    # Events
    "ColorEvent",
    # Observers
    "ColorObserver",
    "UpdateOrigin",
]
