"""Color models: packed ARGB and HSV.

Conversions between the two follow the rules of the Android color utilities
the picker was designed against, so a picked color round-trips to the same
bytes a host toolkit would produce:

- RGB -> HSV uses the channel spread (``max - min``) for saturation and
  leaves hue at 0 for greys.
- HSV -> RGB rounds each channel half-up and yields a plain grey when
  saturation is zero.
"""

import math

from pydantic import BaseModel, ConfigDict, Field

from huewheel.utils.numeric import clamp, round_half_up


class HSV(BaseModel):
    """Hue in degrees, saturation and value in ``[0, 1]``."""

    model_config = ConfigDict(frozen=True)

    hue: float = Field(default=0.0, ge=0.0, lt=360.0, description="Hue in degrees [0, 360)")
    saturation: float = Field(default=0.0, ge=0.0, le=1.0, description="Saturation [0, 1]")
    value: float = Field(default=0.0, ge=0.0, le=1.0, description="Value/brightness [0, 1]")

    def replace(self, **changes: float) -> "HSV":
        """Return a copy with some components replaced."""
        return self.model_copy(update=changes)

    def to_tuple(self) -> tuple[float, float, float]:
        """Convert to ``(hue, saturation, value)``."""
        return (self.hue, self.saturation, self.value)


class Color(BaseModel):
    """
    8-bit ARGB color.

    The model is frozen so colors can be compared, hashed and used as
    notification values without defensive copies.

    Example:
        >>> Color.from_argb(0xFFFF0080).to_hex()
        '#FFFF0080'
    """

    model_config = ConfigDict(frozen=True)

    a: int = Field(default=255, ge=0, le=255, description="Alpha (0-255)")
    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def from_argb(cls, word: int) -> "Color":
        """Unpack a 32-bit ``0xAARRGGBB`` word."""
        word &= 0xFFFFFFFF
        return cls(a=(word >> 24) & 0xFF, r=(word >> 16) & 0xFF, g=(word >> 8) & 0xFF, b=word & 0xFF)

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """
        Parse ``#RRGGBB`` or ``#AARRGGBB`` (the leading ``#`` is optional).

        Raises:
            ValueError: If the text is not 6 or 8 hex digits
        """
        digits = text.strip().removeprefix("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Expected #RRGGBB or #AARRGGBB, got {text!r}")
        try:
            word = int(digits, 16)
        except ValueError:
            raise ValueError(f"Invalid hex color: {text!r}") from None
        if len(digits) == 6:
            word |= 0xFF000000
        return cls.from_argb(word)

    @classmethod
    def from_hsv(cls, hsv: HSV, alpha: int = 255) -> "Color":
        """Build a color from HSV components and an alpha byte."""
        h, s, v = hsv.to_tuple()
        s = clamp(s, 0.0, 1.0)
        v = clamp(v, 0.0, 1.0)
        v_byte = round_half_up(v * 255)

        if s <= 0.0:
            return cls(a=alpha, r=v_byte, g=v_byte, b=v_byte)

        hx = 0.0 if (h < 0 or h >= 360) else h / 60
        w = math.floor(hx)
        f = hx - w

        p = round_half_up((1 - s) * v * 255)
        q = round_half_up((1 - s * f) * v * 255)
        t = round_half_up((1 - s * (1 - f)) * v * 255)

        if w == 0:
            r, g, b = v_byte, t, p
        elif w == 1:
            r, g, b = q, v_byte, p
        elif w == 2:
            r, g, b = p, v_byte, t
        elif w == 3:
            r, g, b = p, q, v_byte
        elif w == 4:
            r, g, b = t, p, v_byte
        else:
            r, g, b = v_byte, p, q

        return cls(a=alpha, r=r, g=g, b=b)

    @classmethod
    def transparent(cls) -> "Color":
        """Fully transparent black."""
        return cls(a=0, r=0, g=0, b=0)

    def to_argb(self) -> int:
        """Pack into a 32-bit ``0xAARRGGBB`` word."""
        return (self.a << 24) | (self.r << 16) | (self.g << 8) | self.b

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hsv(self) -> HSV:
        """Convert the RGB part to HSV (alpha is dropped)."""
        r, g, b = self.r, self.g, self.b
        high = max(r, g, b)
        low = min(r, g, b)
        value = high / 255
        delta = high - low

        if delta == 0:
            return HSV(hue=0.0, saturation=0.0, value=value)

        saturation = delta / high
        if r == high:
            hue = (g - b) / delta
        elif g == high:
            hue = 2 + (b - r) / delta
        else:
            hue = 4 + (r - g) / delta

        hue *= 60
        if hue < 0:
            hue += 360
        return HSV(hue=hue, saturation=saturation, value=value)

    def with_alpha(self, alpha: int) -> "Color":
        """Return the same RGB with a different alpha."""
        return self.model_copy(update={"a": alpha})

    def opaque(self) -> "Color":
        """Return the color with full alpha."""
        return self.with_alpha(255)

    def to_hex(self) -> str:
        """
        Convert to ``#AARRGGBB``.

        Example:
            >>> Color(a=128, r=255, g=0, b=0).to_hex()
            '#80FF0000'
        """
        return f"#{self.a:02X}{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self) -> str:
        return self.to_hex()
