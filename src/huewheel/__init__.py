"""huewheel: color math and widget models for a hue-wheel color picker."""

__version__ = "0.1.0"

from .core import angle_to_color, color_to_angle
from .models import HSV, Color, PickerConfig
from .picker import ChannelBar, ColorWheel

__all__ = [
    "HSV",
    "ChannelBar",
    "Color",
    "ColorWheel",
    "PickerConfig",
    "angle_to_color",
    "color_to_angle",
]
