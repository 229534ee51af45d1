"""Saved widget state.

Hosts persist these with whatever mechanism they use for view state and hand
them back on restore. Both models serialize to plain JSON.
"""

import math

from pydantic import BaseModel, Field

from .color import HSV, Color
from .config import BarRange


class BarState(BaseModel):
    """Everything a bar needs to come back exactly where it was."""

    channel: str = Field(description="Name of the bar's channel")
    base: HSV = Field(description="Base color the bar was showing")
    base_alpha: int = Field(default=255, ge=0, le=255, description="Alpha of the base color")
    level: float = Field(description="Selected channel level")
    range: BarRange = Field(description="Configured range of the bar")


class WheelState(BaseModel):
    """Pointer angle and selection of a hue wheel."""

    angle: float = Field(default=-math.pi / 2, description="Pointer angle in radians")
    old_color: Color | None = Field(default=None, description="Previous-color swatch")
    hsv: HSV = Field(description="Selected hue, saturation and value")
    opacity: int = Field(default=255, ge=0, le=255, description="Selected alpha")
