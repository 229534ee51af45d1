"""Linear channel bar.

One bar type serves every channel; the ``Channel`` strategy decides what the
level means. The bar owns:

- its level (the source of truth) and the pointer offset showing it
- a base selection (HSV + alpha) pushed in by the wheel it is attached to
- the color it shows, composed from the two

Pointer offsets are measured from the start of the track. Touch coordinates
handed to ``press``/``move`` include the margin before the track.
"""

import logging
from typing import TYPE_CHECKING

from huewheel.core.bar_math import channel_to_position, clamp_position, position_to_channel
from huewheel.core.channels import OPACITY, SATURATION, SATURATION_VALUE, VALUE, Channel
from huewheel.models import HSV, BarRange, BarState, Color, PickerConfig
from huewheel.protocols import ColorEvent, ColorObserver, UpdateOrigin
from huewheel.utils.observer import ObserverManager

from .sync import SyncGuard

if TYPE_CHECKING:
    from .wheel import ColorWheel

logger = logging.getLogger(__name__)

DEFAULT_BAR_LENGTH = 240
DEFAULT_BAR_MARGIN = 18


class ChannelBar:
    """
    A draggable bar editing one channel of the selected color.

    Example:
        ```python
        bar = ChannelBar.opacity(length=240)
        bar.set_level(128)
        bar.level      # 128
        bar.position   # 120.47...
        ```
    """

    def __init__(
        self,
        channel: Channel,
        length: int = DEFAULT_BAR_LENGTH,
        margin: int = DEFAULT_BAR_MARGIN,
        minimum: float | None = None,
        maximum: float | None = None,
    ):
        """
        Create a bar.

        Args:
            channel: What the bar edits
            length: Track length in pixels
            margin: Offset of the track start in touch coordinates (pointer halo radius)
            minimum: Level at the start of the track (channel default if None or invalid)
            maximum: Level at the end of the track (channel default if None or invalid)

        Raises:
            ValueError: If length is not positive or margin is negative
        """
        if length <= 0:
            raise ValueError(f"Bar length must be positive, got {length}")
        if margin < 0:
            raise ValueError(f"Bar margin must not be negative, got {margin}")

        self.channel = channel
        self._length = length
        self._margin = margin
        self._range = channel.make_range(minimum, maximum)

        self._base = HSV(hue=0.0, saturation=1.0, value=1.0)
        self._base_alpha = 255

        self._level = channel.initial_level(self._range)
        self._position = self._position_of(self._level)
        self._color = channel.compose(self._base, self._base_alpha, self._level)

        self._wheel: "ColorWheel | None" = None
        self._moving = False
        self._last_notified_level = self._level
        self._observers = ObserverManager[ColorObserver](f"{channel.name} bar")
        self._guard = SyncGuard(f"{channel.name} bar")

    # =================================================================
    # Factories
    # =================================================================

    @classmethod
    def opacity(cls, **kwargs) -> "ChannelBar":
        """Bar editing alpha, 0..255."""
        return cls(OPACITY, **kwargs)

    @classmethod
    def saturation(cls, **kwargs) -> "ChannelBar":
        """Bar editing saturation, 0..1."""
        return cls(SATURATION, **kwargs)

    @classmethod
    def value(cls, **kwargs) -> "ChannelBar":
        """Bar editing value, 0..1."""
        return cls(VALUE, **kwargs)

    @classmethod
    def saturation_value(cls, **kwargs) -> "ChannelBar":
        """Bar running white -> pure hue -> black, levels 0..2."""
        return cls(SATURATION_VALUE, **kwargs)

    @classmethod
    def from_config(cls, channel: Channel, config: PickerConfig) -> "ChannelBar":
        """Bar with geometry and range taken from a PickerConfig."""
        ranges = {
            OPACITY.name: config.opacity_range,
            SATURATION.name: config.saturation_range,
            VALUE.name: config.value_range,
        }
        bar_range = ranges.get(channel.name)
        return cls(
            channel,
            length=config.bar.length,
            margin=config.bar.pointer_halo_radius,
            minimum=bar_range.minimum if bar_range else None,
            maximum=bar_range.maximum if bar_range else None,
        )

    # =================================================================
    # State accessors
    # =================================================================

    @property
    def length(self) -> int:
        return self._length

    @property
    def margin(self) -> int:
        return self._margin

    @property
    def range(self) -> BarRange:
        return self._range

    @property
    def level(self) -> float:
        """Selected channel level (an int for opacity)."""
        return self._level

    @property
    def position(self) -> float:
        """Pointer offset from the start of the track, in ``[0, length]``."""
        return self._position

    @property
    def color(self) -> Color:
        """Color under the pointer."""
        return self._color

    @property
    def base(self) -> HSV:
        return self._base

    @property
    def base_alpha(self) -> int:
        return self._base_alpha

    @property
    def wheel(self) -> "ColorWheel | None":
        return self._wheel

    @property
    def is_moving(self) -> bool:
        return self._moving

    @property
    def min_color(self) -> Color:
        """Color at the start of the track."""
        return self.channel.compose(self._base, self._base_alpha, self._range.minimum)

    @property
    def max_color(self) -> Color:
        """Color at the end of the track."""
        return self.channel.compose(self._base, self._base_alpha, self._range.maximum)

    def level_at(self, position: float) -> float:
        """Level the bar would select with its pointer at ``position``."""
        raw = position_to_channel(position, self._length, self._range.minimum, self._range.maximum)
        return self.channel.settle(raw, self._range)

    def color_at(self, position: float) -> Color:
        """Color the bar would show with its pointer at ``position``."""
        return self.channel.compose(self._base, self._base_alpha, self.level_at(position))

    # =================================================================
    # Observers
    # =================================================================

    def register_observer(self, observer: ColorObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: ColorObserver) -> None:
        self._observers.unregister(observer)

    # =================================================================
    # Programmatic changes
    # =================================================================

    def set_level(self, level: float, origin: UpdateOrigin = UpdateOrigin.PROGRAMMATIC) -> None:
        """
        Select a level; it is clamped into the bar's range first.

        An attached wheel is told about the change.
        """
        with self._guard.drive(origin):
            self._store_level(self.channel.settle(level, self._range))
            self._report_to_wheel(origin)
        self._notify_level(origin)

    def set_color(self, color: Color, origin: UpdateOrigin = UpdateOrigin.PROGRAMMATIC) -> None:
        """Use ``color`` as the base selection, keeping this bar's own level."""
        self.set_base(color.to_hsv(), color.a, origin)

    def set_base(self, hsv: HSV, alpha: int = 255, origin: UpdateOrigin = UpdateOrigin.WHEEL) -> None:
        """
        Replace the base selection the bar composes its color from.

        The level and pointer stay where they are and nothing is reported
        back to the wheel.

        Raises:
            SyncCycleError: If this bar is driving the current update
        """
        self._guard.check_incoming(origin)
        self._base = hsv
        self._base_alpha = alpha
        self._color = self.channel.compose(self._base, self._base_alpha, self._level)

    def receive_level(self, level: float, origin: UpdateOrigin) -> None:
        """
        Take a level pushed in by the wheel.

        Unlike ``set_level`` this does not report back to the wheel.

        Raises:
            SyncCycleError: If this bar is driving the current update
        """
        self._guard.check_incoming(origin)
        self._store_level(self.channel.settle(level, self._range))
        self._notify_level(origin)

    def set_range(self, minimum: float | None = None, maximum: float | None = None) -> None:
        """Change the bar's range; the level is clamped into the new one."""
        self._range = self.channel.make_range(minimum, maximum)
        self.set_level(self._level)

    def set_length(self, length: int) -> None:
        """
        Resize the track, keeping the selected level.

        Raises:
            ValueError: If length is not positive
        """
        if length <= 0:
            raise ValueError(f"Bar length must be positive, got {length}")
        self._length = length
        self._position = self._position_of(self._level)

    # =================================================================
    # Touch gestures
    # =================================================================

    def press(self, coordinate: float) -> bool:
        """
        Start a drag at a touch coordinate along the bar.

        Returns:
            True if the touch landed on the track and moved the pointer
        """
        self._moving = True
        x = coordinate - self._margin
        if 0 <= x <= self._length:
            self._drag(x)
            return True
        return False

    def move(self, coordinate: float) -> None:
        """Drag the pointer; coordinates past the ends pin it to that end."""
        if self._moving:
            self._drag(coordinate - self._margin)

    def release(self) -> None:
        """End the drag and announce the final color."""
        if not self._moving:
            return
        self._moving = False
        self._observers.notify("on_color_event", ColorEvent.COLOR_SELECTED, self._color, UpdateOrigin.BAR)

    # =================================================================
    # Save / restore
    # =================================================================

    def save_state(self) -> BarState:
        return BarState(
            channel=self.channel.name,
            base=self._base,
            base_alpha=self._base_alpha,
            level=self._level,
            range=self._range,
        )

    def restore_state(self, state: BarState) -> None:
        """
        Restore a saved state.

        Raises:
            ValueError: If the state was saved from a bar of another channel
        """
        if state.channel != self.channel.name:
            raise ValueError(f"Cannot restore a '{state.channel}' bar state into a '{self.channel.name}' bar")
        self._range = self.channel.make_range(state.range.minimum, state.range.maximum)
        self._base = state.base
        self._base_alpha = state.base_alpha
        self.set_level(state.level, UpdateOrigin.RESTORE)

    # =================================================================
    # Internals
    # =================================================================

    def _attach(self, wheel: "ColorWheel | None") -> None:
        self._wheel = wheel

    def _position_of(self, level: float) -> float:
        return channel_to_position(level, self._length, self._range.minimum, self._range.maximum)

    def _store_level(self, level: float) -> None:
        self._level = level
        self._position = self._position_of(level)
        self._color = self.channel.compose(self._base, self._base_alpha, level)

    def _drag(self, x: float) -> None:
        with self._guard.drive(UpdateOrigin.BAR):
            self._level = self.level_at(x)
            self._position = clamp_position(x, self._length)
            self._color = self.channel.compose(self._base, self._base_alpha, self._level)
            self._report_to_wheel(UpdateOrigin.BAR)
        self._notify_level(UpdateOrigin.BAR)

    def _report_to_wheel(self, origin: UpdateOrigin) -> None:
        if self._wheel is not None:
            self._wheel.on_bar_changed(self, origin)

    def _notify_level(self, origin: UpdateOrigin) -> None:
        if self._level == self._last_notified_level:
            return
        self._last_notified_level = self._level
        logger.debug(f"{self.channel.name} bar level -> {self._level}")
        self._observers.notify("on_color_event", ColorEvent.LEVEL_CHANGED, self._level, origin)

    def __repr__(self) -> str:
        return f"ChannelBar(channel={self.channel.name!r}, level={self._level!r}, length={self._length})"
