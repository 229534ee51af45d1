"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from huewheel import __version__

from .commands import angle, bar, color, config, wheel

logger = logging.getLogger(__name__)


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path]) -> None:
    """
    Configure logging for the CLI.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log at DEBUG level to ./huewheel-debug.log
        log_file: Log to this file (rotating) instead of stderr
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if debug and not log_file:
        log_file = Path.cwd() / "huewheel-debug.log"

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # Keeps the last 3 files, 1MB each
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=1024 * 1024,
            backupCount=3
        )
    else:
        handler = logging.StreamHandler()

    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file or 'stderr'}")


@click.group()
@click.version_option(version=__version__, prog_name="huewheel")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./huewheel-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Write logs to this file instead of stderr'
)
def cli(verbose: int, debug: bool, log_file: Optional[Path]):
    """
    huewheel - hue wheel color picker math.

    \b
    Examples:
      # Color on the wheel at 30 degrees
      huewheel color 30 --degrees

      # Where the wheel shows a color
      huewheel angle '#FF0080'

      # Opacity bar with the pointer 120px along a 240px track
      huewheel bar opacity 120 --length 240

      # Twelve evenly spaced wheel colors
      huewheel wheel --steps 12
    """
    setup_logging(verbose, debug, log_file)


cli.add_command(color)
cli.add_command(angle)
cli.add_command(bar)
cli.add_command(wheel)
cli.add_command(config)


def main():
    """Entry point for the huewheel console script."""
    cli()


if __name__ == "__main__":
    main()
