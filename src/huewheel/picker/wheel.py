"""Hue wheel with linked bars.

The wheel owns the selection: a hue (from its pointer), a saturation, a
value and an alpha. Bars attached to it edit parts of that selection.

Update flow, one direction per gesture:

    wheel drag   -> wheel updates hue -> pushes base to every bar (no callbacks)
    bar drag     -> bar updates level -> wheel.on_bar_changed
                 -> wheel updates its swatch -> pushes base to the *other* bars

The pointer angle only ever moves from the wheel side; bar edits change the
centre swatch, not the pointer.
"""

import logging

from huewheel.core.wheel_math import (
    DEFAULT_ANGLE,
    angle_to_color,
    color_to_angle,
    point_to_angle,
    pointer_position,
)
from huewheel.models import HSV, Color, PickerConfig, WheelGeometry, WheelState
from huewheel.protocols import ColorEvent, ColorObserver, UpdateOrigin
from huewheel.utils.observer import ObserverManager

from .bar import ChannelBar
from .sync import SyncGuard

logger = logging.getLogger(__name__)


class ColorWheel:
    """
    Circular hue picker.

    Example:
        ```python
        wheel = ColorWheel()
        opacity = ChannelBar.opacity()
        wheel.add_bar(opacity)

        wheel.set_angle(2 * math.pi / 3)   # blue
        opacity.set_level(128)
        wheel.color                          # Color(a=128, r=0, g=0, b=255)
        ```
    """

    def __init__(self, geometry: WheelGeometry | None = None, angle: float = DEFAULT_ANGLE):
        self.geometry = geometry or WheelGeometry()

        self._angle = angle
        self._pointer_color = angle_to_color(angle)
        self._hsv = self._pointer_color.to_hsv()
        self._opacity = 255
        self._color = Color.from_hsv(self._hsv, self._opacity)
        self._old_color = self._color

        self._bars: list[ChannelBar] = []
        self._moving = False
        self._last_notified_color = self._color
        self._observers = ObserverManager[ColorObserver]("wheel")
        self._guard = SyncGuard("wheel")

    @classmethod
    def from_config(cls, config: PickerConfig) -> "ColorWheel":
        return cls(geometry=config.wheel)

    # =================================================================
    # State accessors
    # =================================================================

    @property
    def angle(self) -> float:
        """Pointer angle in radians."""
        return self._angle

    @property
    def pointer_color(self) -> Color:
        """Fully saturated color under the pointer."""
        return self._pointer_color

    @property
    def color(self) -> Color:
        """Selected color (the centre swatch)."""
        return self._color

    @property
    def hsv(self) -> HSV:
        return self._hsv

    @property
    def opacity(self) -> int:
        return self._opacity

    @property
    def old_color(self) -> Color:
        """Previous-color swatch; pressing the centre reverts to it."""
        return self._old_color

    @property
    def bars(self) -> tuple[ChannelBar, ...]:
        return tuple(self._bars)

    @property
    def is_moving(self) -> bool:
        return self._moving

    def set_old_color(self, color: Color) -> None:
        self._old_color = color

    # =================================================================
    # Observers
    # =================================================================

    def register_observer(self, observer: ColorObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: ColorObserver) -> None:
        self._observers.unregister(observer)

    # =================================================================
    # Bars
    # =================================================================

    def add_bar(self, bar: ChannelBar) -> None:
        """
        Link a bar to the wheel.

        The bar picks up the wheel's selection as its base, and the bar's
        level is folded into the wheel's selection.
        """
        if bar in self._bars:
            logger.debug(f"{bar} already linked")
            return
        if bar.wheel is not None and bar.wheel is not self:
            bar.wheel.remove_bar(bar)

        self._bars.append(bar)
        bar._attach(self)
        bar.set_base(self._hsv, self._opacity, UpdateOrigin.PROGRAMMATIC)
        self.on_bar_changed(bar, UpdateOrigin.PROGRAMMATIC)
        logger.info(f"Linked {bar.channel.name} bar to wheel")

    def remove_bar(self, bar: ChannelBar) -> None:
        if bar not in self._bars:
            logger.warning(f"Attempted to unlink unknown bar: {bar}")
            return
        self._bars.remove(bar)
        bar._attach(None)
        logger.info(f"Unlinked {bar.channel.name} bar from wheel")

    def on_bar_changed(self, bar: ChannelBar, origin: UpdateOrigin) -> None:
        """
        Fold a bar's new level into the selection.

        Called by linked bars. The pointer angle is left alone; only the
        selected color changes. Every other linked bar gets the new base.

        Raises:
            SyncCycleError: If the wheel is driving the current update
        """
        with self._guard.drive(origin):
            self._hsv, self._opacity = bar.channel.apply(self._hsv, self._opacity, bar.level)
            for other in self._bars:
                if other is not bar:
                    other.set_base(self._hsv, self._opacity, origin)
            self._update_selection()
        self._notify_color(origin)

    # =================================================================
    # Programmatic changes
    # =================================================================

    def set_angle(self, angle: float, origin: UpdateOrigin = UpdateOrigin.PROGRAMMATIC) -> None:
        """
        Move the pointer to ``angle`` radians.

        Parts of the selection no linked bar controls follow the pointer
        (full saturation, full value, opaque).
        """
        with self._guard.drive(origin):
            self._angle = angle
            self._pointer_color = angle_to_color(angle)

            controlled = self._controlled()
            self._hsv = HSV(
                hue=self._pointer_color.to_hsv().hue,
                saturation=self._hsv.saturation if "saturation" in controlled else 1.0,
                value=self._hsv.value if "value" in controlled else 1.0,
            )
            if "alpha" not in controlled:
                self._opacity = 255

            for bar in self._bars:
                bar.set_base(self._hsv, self._opacity, origin)
            self._update_selection()
        self._notify_color(origin)

    def set_color(self, color: Color, origin: UpdateOrigin = UpdateOrigin.PROGRAMMATIC) -> None:
        """
        Select ``color``.

        The pointer moves to the closest hue on the wheel. Colors far from
        the ring (greys especially) land on an approximate hue; the
        selection keeps the color's own saturation, value and alpha.
        Every linked bar takes its level from ``color``.
        """
        with self._guard.drive(origin):
            self._angle = color_to_angle(color)
            self._pointer_color = angle_to_color(self._angle)

            hsv = color.to_hsv()
            self._hsv = hsv.replace(hue=self._pointer_color.to_hsv().hue)
            self._opacity = color.a

            for bar in self._bars:
                bar.set_base(self._hsv, self._opacity, origin)
                bar.receive_level(bar.channel.level_of(color), origin)
                # The bar may have clamped or snapped the level.
                self._hsv, self._opacity = bar.channel.apply(self._hsv, self._opacity, bar.level)

            for bar in self._bars:
                bar.set_base(self._hsv, self._opacity, origin)
            self._update_selection()
        self._notify_color(origin)

    # =================================================================
    # Touch gestures (coordinates relative to the wheel centre)
    # =================================================================

    def press(self, x: float, y: float) -> bool:
        """
        Handle a touch down.

        A touch on the pointer starts a drag. A touch on the centre swatch
        reverts the selection to the old color.

        Returns:
            True if the touch grabbed the pointer
        """
        halo = self.geometry.pointer_halo_radius
        px, py = pointer_position(self._angle, self.geometry.wheel_radius)
        grabbed = abs(x - px) <= halo and abs(y - py) <= halo
        if grabbed:
            self._moving = True

        center = self.geometry.center_radius
        if abs(x) <= center and abs(y) <= center:
            logger.debug(f"Centre pressed, reverting to {self._old_color}")
            self.set_color(self._old_color, UpdateOrigin.WHEEL)

        return grabbed

    def move(self, x: float, y: float) -> None:
        """Drag the pointer to the angle of ``(x, y)``."""
        if self._moving:
            self.set_angle(point_to_angle(x, y), UpdateOrigin.WHEEL)

    def release(self) -> None:
        """End the drag and announce the final color."""
        if not self._moving:
            return
        self._moving = False
        self._observers.notify("on_color_event", ColorEvent.COLOR_SELECTED, self._color, UpdateOrigin.WHEEL)

    # =================================================================
    # Save / restore
    # =================================================================

    def save_state(self) -> WheelState:
        return WheelState(angle=self._angle, old_color=self._old_color, hsv=self._hsv, opacity=self._opacity)

    def restore_state(self, state: WheelState) -> None:
        with self._guard.drive(UpdateOrigin.RESTORE):
            self._angle = state.angle
            self._pointer_color = angle_to_color(state.angle)
            self._hsv = state.hsv
            self._opacity = state.opacity
            if state.old_color is not None:
                self._old_color = state.old_color

            for bar in self._bars:
                bar.set_base(self._hsv, self._opacity, UpdateOrigin.RESTORE)
            self._update_selection()
        self._notify_color(UpdateOrigin.RESTORE)

    # =================================================================
    # Internals
    # =================================================================

    def _controlled(self) -> set[str]:
        controlled: set[str] = set()
        for bar in self._bars:
            controlled |= bar.channel.controls
        return controlled

    def _update_selection(self) -> None:
        self._color = Color.from_hsv(self._hsv, self._opacity)

    def _notify_color(self, origin: UpdateOrigin) -> None:
        if self._color == self._last_notified_color:
            return
        self._last_notified_color = self._color
        logger.debug(f"Wheel color -> {self._color} ({origin.value})")
        self._observers.notify("on_color_event", ColorEvent.COLOR_CHANGED, self._color, origin)

    def __repr__(self) -> str:
        return f"ColorWheel(angle={self._angle:.4f}, color={self._color})"
