"""Linear bar math: pointer offsets to channel levels and back.

A bar's pointer lives in ``[0, length]`` once the track margin has been
subtracted. Offsets map linearly onto ``[minimum, maximum]`` of the bar's
channel.
"""

from huewheel.utils.numeric import clamp, round_half_up

OPACITY_SNAP_LOW = 5
OPACITY_SNAP_HIGH = 250


def clamp_position(x: float, length: float) -> float:
    """Clamp a pointer offset onto the track."""
    return clamp(x, 0.0, float(length))


def position_to_channel(x: float, length: float, minimum: float, maximum: float) -> float:
    """
    Channel level at pointer offset ``x``.

    Offsets beyond either end of the track give the endpoint level.
    """
    if length <= 0:
        return minimum
    x = clamp_position(x, length)
    level = (x / length) * (maximum - minimum) + minimum
    return clamp(level, minimum, maximum)


def channel_to_position(level: float, length: float, minimum: float, maximum: float) -> float:
    """Pointer offset that shows ``level``; levels outside the range pin to an end."""
    if maximum == minimum:
        return 0.0
    level = clamp(level, minimum, maximum)
    return (level - minimum) / (maximum - minimum) * length


def snap_opacity(alpha: float) -> int:
    """
    Round an alpha level, snapping the track ends.

    Anything under 5 becomes fully transparent and anything over 250 fully
    opaque, so both extremes are easy to hit with a finger.
    """
    if alpha < OPACITY_SNAP_LOW:
        return 0
    if alpha > OPACITY_SNAP_HIGH:
        return 255
    return round_half_up(alpha)
