"""Picker events and update origins.

- ColorEvent: what changed, as seen by observers
- UpdateOrigin: who started the update; carried through every wheel/bar push
"""

from enum import Enum


class ColorEvent(Enum):
    """Events fired by wheels and bars."""

    COLOR_CHANGED = "color_changed"    # Wheel's selected color changed
    LEVEL_CHANGED = "level_changed"    # Bar's channel level changed
    COLOR_SELECTED = "color_selected"  # Gesture ended; value is the final selection


class UpdateOrigin(Enum):
    """Where an update entered the picker."""

    WHEEL = "wheel"                # User dragged the wheel pointer
    BAR = "bar"                    # User dragged a bar pointer
    PROGRAMMATIC = "programmatic"  # Host code called a setter
    RESTORE = "restore"            # Saved state was restored
