"""Vectorised gradient sampling for hosts that paint the widgets.

Arrays are ``(steps, 4)`` uint8 in A, R, G, B column order. Each row equals
what the scalar functions return for the same angle or pointer offset, so a
painted gradient never disagrees with the picked color.
"""

from typing import TYPE_CHECKING

import numpy as np

from huewheel.utils.numeric import FRACTION_PLACES

from .wheel_math import ANCHOR_PALETTE, SEGMENTS, TWO_PI

if TYPE_CHECKING:
    from huewheel.picker.bar import ChannelBar

_ANCHORS = np.array([[c.a, c.r, c.g, c.b] for c in ANCHOR_PALETTE], dtype=np.float64)


def _round_half_up(values: np.ndarray) -> np.ndarray:
    return np.floor(values + 0.5)


def sample_angles(angles: np.ndarray) -> np.ndarray:
    """Wheel colors at arbitrary angles (radians), as an ``(n, 4)`` ARGB array."""
    angles = np.asarray(angles, dtype=np.float64)
    # NaN and infinities land on the red anchor, like angle_to_unit
    unit = np.mod(np.where(np.isfinite(angles), angles, 0.0) / TWO_PI, 1.0)

    scaled = unit * SEGMENTS
    index = np.floor(scaled).astype(np.int64)
    fraction = np.round(scaled - index, FRACTION_PLACES)

    carry = fraction >= 1.0
    index = np.where(carry, index + 1, index)
    fraction = np.where(carry, 0.0, fraction)
    # Anything at or past the last anchor is the end of the final segment.
    over = index >= SEGMENTS
    index = np.where(over, SEGMENTS - 1, index)
    fraction = np.where(over, 1.0, fraction)

    start = _ANCHORS[index]
    end = _ANCHORS[index + 1]
    blended = start + _round_half_up(fraction[:, None] * (end - start))
    return blended.astype(np.uint8)


def sample_wheel(steps: int) -> np.ndarray:
    """
    ``steps`` colors evenly spaced around the wheel, starting at angle 0.

    Raises:
        ValueError: If steps is not positive
    """
    if steps <= 0:
        raise ValueError(f"steps must be positive, got {steps}")
    angles = np.arange(steps, dtype=np.float64) * (TWO_PI / steps)
    return sample_angles(angles)


def sample_bar(bar: "ChannelBar", steps: int) -> np.ndarray:
    """
    ``steps`` colors evenly spaced along a bar, start and end included.

    Raises:
        ValueError: If steps is less than 2
    """
    if steps < 2:
        raise ValueError(f"steps must be at least 2, got {steps}")
    positions = np.linspace(0.0, float(bar.length), steps)
    rows = [bar.color_at(float(x)) for x in positions]
    return np.array([[c.a, c.r, c.g, c.b] for c in rows], dtype=np.uint8)


def to_argb_words(samples: np.ndarray) -> np.ndarray:
    """Pack an ``(n, 4)`` ARGB array into ``0xAARRGGBB`` uint32 words."""
    samples = np.asarray(samples, dtype=np.uint32)
    return (samples[:, 0] << 24) | (samples[:, 1] << 16) | (samples[:, 2] << 8) | samples[:, 3]
