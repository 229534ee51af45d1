"""Synchronisation errors between a wheel and its bars."""

from .base import HueWheelError


class SyncCycleError(HueWheelError):
    """
    An update re-entered a widget that is driving the current gesture.

    Wheel-to-bar and bar-to-wheel updates are one-way per gesture. Seeing
    this error means a widget tried to push a change back into the widget
    that started it.
    """

    def __init__(self, widget: str, driving: str, incoming: str):
        """
        Initialize a sync cycle error.

        Args:
            widget: Description of the widget that detected the cycle
            driving: Origin of the gesture the widget is driving
            incoming: Origin of the update that tried to re-enter it
        """
        super().__init__(
            user_message=f"Update cycle detected in {widget}",
            technical_message=(
                f"{widget} is driving a '{driving}' update and received a "
                f"re-entrant '{incoming}' update"
            ),
            recoverable=False,
            recovery_hint="Bars must not push updates back to the widget that is driving them",
        )
        self.widget = widget
        self.driving = driving
        self.incoming = incoming
