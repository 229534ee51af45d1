"""Observer protocols for picker events."""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .events import ColorEvent, UpdateOrigin


@runtime_checkable
class ColorObserver(Protocol):
    """
    Observer that receives wheel and bar change events.

    Hosts implement this to repaint, update text fields or persist the pick.
    """

    def on_color_event(self, event: "ColorEvent", value: Any, origin: "UpdateOrigin") -> None:
        """
        Handle a picker event.

        Args:
            event: The type of event
            value: The new ``Color`` for wheel events, the new level for
                ``LEVEL_CHANGED``
            origin: Where the update that caused the event started

        Threading:
            Called synchronously from the host's UI thread, inside the touch
            or setter call that made the change.

        Error Handling:
            Exceptions raised here are caught and logged by the widget; they
            never interrupt the gesture or other observers.
        """
        ...
