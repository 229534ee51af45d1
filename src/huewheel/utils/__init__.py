"""Generic utility modules for huewheel.

This package contains utilities that are not specific to the picker domain:
- numeric: half-up rounding and clamping
- observer: observer list management
- persistence: Pydantic JSON load/save
"""

from .numeric import clamp, round_half_up, trim_fraction
from .observer import ObserverManager

__all__ = ["ObserverManager", "clamp", "round_half_up", "trim_fraction"]
