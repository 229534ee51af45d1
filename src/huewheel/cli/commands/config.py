"""
Config command group.

Commands:
    - config show [--field FIELD]    # Display configuration
    - config validate                # Validate config file
    - config reset                   # Write defaults
    - config path                    # Print the config file location
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from huewheel.exceptions import ConfigurationError, format_error_for_display
from huewheel.models import PickerConfig
from huewheel.models.config import DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


def _fail(error: Exception) -> None:
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"Error: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"Hint: {recovery_hint}", err=True)
    sys.exit(1)


@click.group(name="config")
@click.option(
    '--config', '-c', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help='Config file to use'
)
@click.pass_context
def config(ctx: click.Context, config_path: Path):
    """Show, validate or reset picker configuration."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@config.command(name="show")
@click.option('--field', '-f', type=str, default=None, help='Show specific field instead of all fields')
@click.pass_context
def show(ctx: click.Context, field: Optional[str]):
    """Display current configuration."""
    path = ctx.obj["config_path"]
    try:
        model = PickerConfig.load_or_default(path)
    except ConfigurationError as e:
        _fail(e)
        return

    if field:
        if field not in PickerConfig.model_fields:
            click.echo(f"Error: Field '{field}' does not exist", err=True)
            sys.exit(1)
        click.echo(f"{field}: {getattr(model, field)}")
        return

    click.echo("\nPickerConfig Configuration:")
    click.echo("=" * 60)
    for key, value in model.model_dump().items():
        click.echo(f"  {key}: {value}")
    click.echo("")


@config.command(name="validate")
@click.pass_context
def validate(ctx: click.Context):
    """Validate the config file."""
    path = ctx.obj["config_path"]
    if not path.exists():
        click.echo(f"No config file at {path}; defaults apply")
        return
    try:
        PickerConfig.load_or_default(path)
    except ConfigurationError as e:
        _fail(e)
        return
    click.echo(f"✓ {path} is valid")


@config.command(name="reset")
@click.confirmation_option(prompt='Overwrite the config file with defaults?')
@click.pass_context
def reset(ctx: click.Context):
    """Write default configuration to the config file."""
    path = ctx.obj["config_path"]
    try:
        PickerConfig().save(path)
    except OSError as e:
        logger.exception(f"Failed to write {path}")
        _fail(e)
        return
    click.echo(f"Configuration reset to defaults in {path}")


@config.command(name="path")
@click.pass_context
def path(ctx: click.Context):
    """Print the config file location."""
    click.echo(str(ctx.obj["config_path"]))
