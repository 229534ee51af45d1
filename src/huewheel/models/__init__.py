"""Data models for the color picker."""

from .color import HSV, Color
from .config import (
    OPACITY_LIMITS,
    TONE_LIMITS,
    UNIT_LIMITS,
    BarGeometry,
    BarRange,
    PickerConfig,
    RangeLimits,
    WheelGeometry,
)
from .state import BarState, WheelState

__all__ = [
    # Limits
    "OPACITY_LIMITS",
    "TONE_LIMITS",
    "UNIT_LIMITS",
    # Models
    "HSV",
    "BarGeometry",
    "BarRange",
    "BarState",
    "Color",
    "PickerConfig",
    "RangeLimits",
    "WheelGeometry",
    "WheelState",
]
