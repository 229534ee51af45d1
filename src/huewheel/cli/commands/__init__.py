"""CLI commands for huewheel."""

from .config import config
from .convert import angle, bar, color, wheel

__all__ = ["angle", "bar", "color", "config", "wheel"]
