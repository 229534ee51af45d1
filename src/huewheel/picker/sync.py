"""Gesture ownership between a wheel and its bars.

Exactly one widget drives any update. The driving widget enters its guard
for the duration of the update; if the update finds its way back into that
widget (a bar re-notifying the wheel that is pushing to it, a wheel pushing
into the bar the user is dragging) the guard raises instead of recursing.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from huewheel.exceptions import SyncCycleError
from huewheel.protocols import UpdateOrigin

logger = logging.getLogger(__name__)


class SyncGuard:
    """Tracks whether a widget is currently driving an update."""

    def __init__(self, owner: str):
        self._owner = owner
        self._driving: UpdateOrigin | None = None

    @property
    def driving(self) -> UpdateOrigin | None:
        """Origin of the update this widget is driving, if any."""
        return self._driving

    @property
    def active(self) -> bool:
        return self._driving is not None

    def check_incoming(self, origin: UpdateOrigin) -> None:
        """
        Reject an update pushed into the widget while it drives one.

        Raises:
            SyncCycleError: If the widget is driving an update
        """
        if self._driving is not None:
            raise SyncCycleError(self._owner, self._driving.value, origin.value)

    @contextmanager
    def drive(self, origin: UpdateOrigin) -> Iterator[None]:
        """
        Mark the widget as driving an ``origin`` update.

        Raises:
            SyncCycleError: If the widget is already driving an update
        """
        self.check_incoming(origin)
        self._driving = origin
        logger.debug(f"{self._owner} driving {origin.value} update")
        try:
            yield
        finally:
            self._driving = None
