"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from huewheel.picker import ChannelBar, ColorWheel


class RecordingObserver:
    """ColorObserver that keeps every event it receives."""

    def __init__(self):
        self.events = []

    def on_color_event(self, event, value, origin):
        self.events.append((event, value, origin))

    def of(self, event):
        """Values received for one event type, in order."""
        return [value for e, value, _ in self.events if e == event]

    def origins(self, event):
        return [origin for e, _, origin in self.events if e == event]


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def recorder():
    """A fresh recording observer."""
    return RecordingObserver()


@pytest.fixture
def wheel():
    """A wheel with default geometry and pointer at the top."""
    return ColorWheel()


@pytest.fixture
def opacity_bar():
    """An unlinked 240px opacity bar with no margin."""
    return ChannelBar.opacity(length=240, margin=0)


@pytest.fixture
def linked_wheel():
    """A wheel linked to opacity and saturation/value bars.

    Returns:
        Tuple of (wheel, opacity bar, saturation/value bar)
    """
    wheel = ColorWheel()
    opacity = ChannelBar.opacity(length=240, margin=0)
    tone = ChannelBar.saturation_value(length=240, margin=0)
    wheel.add_bar(opacity)
    wheel.add_bar(tone)
    return wheel, opacity, tone
