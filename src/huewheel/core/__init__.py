"""Pure color math: wheel angles, bar offsets and channel strategies.

Nothing in this package holds state or raises for out-of-range input; angles
wrap and offsets clamp.
"""

from .bar_math import channel_to_position, clamp_position, position_to_channel, snap_opacity
from .channels import (
    CHANNELS,
    OPACITY,
    SATURATION,
    SATURATION_VALUE,
    VALUE,
    Channel,
    get_channel,
)
from .wheel_math import (
    ANCHOR_PALETTE,
    DEFAULT_ANGLE,
    TWO_PI,
    angle_to_color,
    color_to_angle,
    normalize_color,
    point_to_angle,
    pointer_position,
)

__all__ = [
    "ANCHOR_PALETTE",
    "CHANNELS",
    "DEFAULT_ANGLE",
    "OPACITY",
    "SATURATION",
    "SATURATION_VALUE",
    "TWO_PI",
    "VALUE",
    "Channel",
    "angle_to_color",
    "channel_to_position",
    "clamp_position",
    "color_to_angle",
    "get_channel",
    "normalize_color",
    "point_to_angle",
    "pointer_position",
    "position_to_channel",
    "snap_opacity",
]
