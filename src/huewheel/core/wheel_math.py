"""Hue wheel math: angles to colors and back.

The wheel is a sweep through seven anchor colors placed at equal angles.
Colors between anchors are linear per-channel blends, so every color on the
ring has full saturation and full value.

Angles are radians in the host's screen coordinate system (y grows
downwards), which is why the default pointer sits at ``-pi/2``: the top of
the wheel.
"""

import logging
import math

from huewheel.models.color import HSV, Color
from huewheel.utils.numeric import round_half_up, trim_fraction

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi

ANCHOR_PALETTE: tuple[Color, ...] = (
    Color.from_argb(0xFFFF0000),  # red
    Color.from_argb(0xFFFF00FF),  # magenta
    Color.from_argb(0xFF0000FF),  # blue
    Color.from_argb(0xFF00FFFF),  # cyan
    Color.from_argb(0xFF00FF00),  # green
    Color.from_argb(0xFFFFFF00),  # yellow
    Color.from_argb(0xFFFF0000),  # red
)

SEGMENTS = len(ANCHOR_PALETTE) - 1

DEFAULT_ANGLE = -math.pi / 2

# RGB channel order used by the normalization tie-breaks.
_CHANNELS = ("r", "g", "b")


def _blend(s: int, d: int, p: float) -> int:
    return s + round_half_up(p * (d - s))


def angle_to_unit(angle: float) -> float:
    """
    Map an angle in radians to its fraction of a full turn in ``[0, 1]``.

    Non-finite angles (NaN, infinities) map to 0, the red anchor.
    """
    if not math.isfinite(angle):
        return 0.0
    return (angle / TWO_PI) % 1.0


def angle_to_color(angle: float) -> Color:
    """
    Color on the wheel at ``angle`` radians.

    The angle may be any real number; it is wrapped to a full turn first.

    Example:
        >>> angle_to_color(math.pi / 6).to_argb() == 0xFFFF0080
        True
    """
    unit = angle_to_unit(angle)

    if unit <= 0:
        return ANCHOR_PALETTE[0]
    if unit >= 1:
        return ANCHOR_PALETTE[-1]

    scaled = unit * SEGMENTS
    i = int(scaled)
    p = trim_fraction(scaled - i)
    if p >= 1:
        i, p = i + 1, 0.0
    if i >= SEGMENTS:
        return ANCHOR_PALETTE[-1]

    c0 = ANCHOR_PALETTE[i]
    c1 = ANCHOR_PALETTE[i + 1]
    return Color(
        a=_blend(c0.a, c1.a, p),
        r=_blend(c0.r, c1.r, p),
        g=_blend(c0.g, c1.g, p),
        b=_blend(c0.b, c1.b, p),
    )


def normalize_color(color: Color) -> tuple[Color, str]:
    """
    Project a color onto the wheel's ring.

    Saturation and value are forced to 1, then the lowest RGB channel is
    pushed to 0 and the highest to 255. The middle channel keeps its value.
    Ties go to the lower channel for the minimum and to the higher one for
    the maximum.

    Close to the ring this barely moves a color. Far from it the result can
    look unrelated; every grey lands on red.

    Returns:
        Tuple of (normalized opaque color, name of the preserved middle channel)
    """
    hsv = color.to_hsv()
    projected = Color.from_hsv(HSV(hue=hsv.hue, saturation=1.0, value=1.0))
    r, g, b = projected.to_rgb_tuple()

    if r <= g and r <= b:
        low = "r"
        high, middle = ("g", "b") if g > b else ("b", "g")
    elif g <= r and g <= b:
        low = "g"
        high, middle = ("r", "b") if r > b else ("b", "r")
    else:
        low = "b"
        high, middle = ("r", "g") if r > g else ("g", "r")

    channels = {"r": r, "g": g, "b": b}
    channels[low] = 0
    channels[high] = 255
    return Color(a=255, **channels), middle


def color_to_angle(color: Color) -> float:
    """
    Angle in ``(-pi, pi]`` at which the wheel shows ``color``.

    The color is projected onto the ring with :func:`normalize_color`. Zeroing
    its middle channel leaves one of the primary anchors. The middle channel
    then gives the distance from that anchor along whichever neighbouring
    segment raises it.

    Exact anchor colors map to ``2*pi*i/6``. Desaturated colors map to an
    approximate angle; greys always map to 0.
    """
    normalized, middle = normalize_color(color)
    anchor = normalized.model_copy(update={middle: 0})
    decimals = getattr(normalized, middle) / 255

    for i, candidate in enumerate(ANCHOR_PALETTE[:-1]):
        if candidate != anchor:
            continue

        following = ANCHOR_PALETTE[i + 1]
        if getattr(following, middle) != getattr(anchor, middle):
            position = i + decimals
        else:
            index = SEGMENTS if i == 0 else i
            position = index - decimals

        angle = TWO_PI * position / SEGMENTS
        if angle > math.pi:
            angle -= TWO_PI
        return angle

    # Unreachable: normalization always yields a primary, and every primary is an anchor.
    logger.warning(f"No wheel anchor for normalized color {normalized}, using angle 0")
    return 0.0


def point_to_angle(x: float, y: float) -> float:
    """Angle of a point relative to the wheel centre."""
    return math.atan2(y, x)


def pointer_position(angle: float, radius: float) -> tuple[float, float]:
    """Centre of the pointer on a ring of ``radius`` at ``angle``."""
    return (radius * math.cos(angle), radius * math.sin(angle))
