"""Command-line interface for huewheel."""

from .main import cli

__all__ = ["cli"]
