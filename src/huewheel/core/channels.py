"""Channel strategies for linear bars.

A bar is one generic widget; what it edits is described by a ``Channel``:
where the level sits in a color, how a level folds back into a selection,
which ranges are acceptable and how levels are quantized.

Built-in channels:

| channel            | levels      | edits                                   |
|--------------------|-------------|-----------------------------------------|
| OPACITY            | 0..255 int  | alpha                                   |
| SATURATION         | 0..1        | saturation                              |
| VALUE              | 0..1        | value                                   |
| SATURATION_VALUE   | 0..2        | white -> pure hue -> black on one track |
"""

from collections.abc import Callable
from dataclasses import dataclass

from huewheel.models.color import HSV, Color
from huewheel.models.config import OPACITY_LIMITS, TONE_LIMITS, UNIT_LIMITS, BarRange, RangeLimits
from huewheel.utils.numeric import clamp, round_half_up

from .bar_math import snap_opacity

# (base hsv, base alpha, level) -> (hsv, alpha)
Apply = Callable[[HSV, int, float], tuple[HSV, int]]


@dataclass(frozen=True)
class Channel:
    """One editable dimension of a selected color."""

    name: str
    limits: RangeLimits
    controls: frozenset[str]
    extract: Callable[[Color], float]
    apply: Apply
    quantize: Callable[[float], float]
    initial: float | None = None

    def make_range(self, minimum: float | None = None, maximum: float | None = None) -> BarRange:
        """Range for a bar of this channel; invalid ends fall back to defaults."""
        return self.limits.sanitize(minimum, maximum)

    def settle(self, level: float, bar_range: BarRange) -> float:
        """Clamp a requested level into ``bar_range`` and quantize it."""
        level = clamp(level, bar_range.minimum, bar_range.maximum)
        level = clamp(self.quantize(level), bar_range.minimum, bar_range.maximum)
        if self.limits.integral:
            return round_half_up(level)
        return level

    def initial_level(self, bar_range: BarRange) -> float:
        """Level of a freshly created bar: ``initial`` or the end of the track."""
        start = self.initial if self.initial is not None else bar_range.maximum
        return self.settle(start, bar_range)

    def level_of(self, color: Color) -> float:
        """Read this channel's level from a color (before any range applies)."""
        return self.quantize(self.extract(color))

    def compose(self, base: HSV, alpha: int, level: float) -> Color:
        """Color shown by a bar at ``level`` over a base selection."""
        hsv, alpha = self.apply(base, alpha, level)
        return Color.from_hsv(hsv, alpha)

    def __str__(self) -> str:
        return self.name


def _identity(level: float) -> float:
    return level


def _tone_of(color: Color) -> float:
    hsv = color.to_hsv()
    if hsv.saturation < hsv.value:
        return hsv.saturation
    return 2.0 - hsv.value


def _apply_tone(base: HSV, alpha: int, level: float) -> tuple[HSV, int]:
    if level <= 1.0:
        return base.replace(saturation=level, value=1.0), alpha
    return base.replace(saturation=1.0, value=2.0 - level), alpha


OPACITY = Channel(
    name="opacity",
    controls=frozenset({"alpha"}),
    limits=OPACITY_LIMITS,
    extract=lambda color: color.a,
    apply=lambda base, alpha, level: (base, int(level)),
    quantize=snap_opacity,
)

SATURATION = Channel(
    name="saturation",
    controls=frozenset({"saturation"}),
    limits=UNIT_LIMITS,
    extract=lambda color: color.to_hsv().saturation,
    apply=lambda base, alpha, level: (base.replace(saturation=level), alpha),
    quantize=_identity,
)

VALUE = Channel(
    name="value",
    controls=frozenset({"value"}),
    limits=UNIT_LIMITS,
    extract=lambda color: color.to_hsv().value,
    apply=lambda base, alpha, level: (base.replace(value=level), alpha),
    quantize=_identity,
)

SATURATION_VALUE = Channel(
    name="saturation_value",
    controls=frozenset({"saturation", "value"}),
    limits=TONE_LIMITS,
    extract=_tone_of,
    apply=_apply_tone,
    quantize=_identity,
    initial=1.0,
)

CHANNELS: dict[str, Channel] = {
    channel.name: channel for channel in (OPACITY, SATURATION, VALUE, SATURATION_VALUE)
}


def get_channel(name: str) -> Channel:
    """
    Look up a built-in channel by name.

    Raises:
        KeyError: If no channel has that name
    """
    try:
        return CHANNELS[name]
    except KeyError:
        raise KeyError(f"Unknown channel '{name}', expected one of {sorted(CHANNELS)}") from None
