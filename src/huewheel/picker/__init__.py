"""Picker widgets: the hue wheel and its channel bars.

These are framework-free widget models. A host toolkit forwards touch
coordinates to ``press``/``move``/``release``, paints from the exposed
colors and offsets, and registers a ``ColorObserver`` for changes.
"""

from .bar import ChannelBar
from .sync import SyncGuard
from .wheel import ColorWheel

__all__ = ["ChannelBar", "ColorWheel", "SyncGuard"]
