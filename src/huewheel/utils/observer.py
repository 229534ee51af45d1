"""Generic observer list.

Wheels and bars each keep one of these for their change listeners. All
picker mutation happens on the host's UI thread, so the manager holds no lock;
it only guarantees idempotent registration and that one failing observer does
not starve the others.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class ObserverManager[T: object]:
    """
    Observer list with idempotent registration and isolated notification.

    Type Parameters:
        T: The observer protocol type (e.g., ColorObserver)

    Example:
        ```python
        class MyWidget:
            def __init__(self):
                self._observers = ObserverManager[ColorObserver]("wheel")

            def register_observer(self, observer: ColorObserver) -> None:
                self._observers.register(observer)

            def _changed(self, color, origin):
                self._observers.notify("on_color_event", ColorEvent.COLOR_CHANGED, color, origin)
        ```
    """

    def __init__(self, label: str = "observer"):
        """
        Args:
            label: Who owns the list, used in log messages (e.g. "wheel", "opacity bar")
        """
        self._label = label
        self._listeners: list[T] = []

    def register(self, observer: T) -> None:
        """Add an observer; adding one twice is a no-op."""
        if observer in self._listeners:
            logger.debug(f"{self._label}: {observer} already listening")
            return
        self._listeners.append(observer)
        logger.debug(f"{self._label}: added listener {observer}")

    def unregister(self, observer: T) -> None:
        """Remove an observer; unknown observers are logged and ignored."""
        try:
            self._listeners.remove(observer)
        except ValueError:
            logger.warning(f"{self._label}: cannot remove {observer}, it was never registered")
            return
        logger.debug(f"{self._label}: removed listener {observer}")

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """
        Call ``callback_name`` on every registered observer.

        Iterates over a snapshot, so observers may unregister themselves
        from inside the callback.

        Error Handling:
            A failing observer is logged with its traceback; the rest are
            still called.
        """
        for observer in tuple(self._listeners):
            callback = getattr(observer, callback_name, None)
            if callback is None:
                logger.error(f"{self._label}: listener {observer} has no method '{callback_name}'")
                continue
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"{self._label}: listener {observer} failed in {callback_name}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        """Drop every observer."""
        if self._listeners:
            logger.debug(f"{self._label}: dropping {len(self._listeners)} listener(s)")
        self._listeners.clear()

    def __contains__(self, observer: T) -> bool:
        return observer in self._listeners

    def __len__(self) -> int:
        return len(self._listeners)

    def __bool__(self) -> bool:
        return bool(self._listeners)
