"""Color math commands: color, angle, bar, wheel."""

import logging
import math

import click

from huewheel.core import CHANNELS, angle_to_color, color_to_angle, get_channel
from huewheel.core.gradient import sample_wheel, to_argb_words
from huewheel.models import Color
from huewheel.picker import ChannelBar

logger = logging.getLogger(__name__)


class ColorParamType(click.ParamType):
    """Click parameter accepting #RRGGBB or #AARRGGBB."""

    name = "color"

    def convert(self, value, param, ctx):
        if isinstance(value, Color):
            return value
        try:
            return Color.from_hex(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


COLOR = ColorParamType()


@click.command()
@click.argument('value', type=float)
@click.option('--degrees', is_flag=True, help='Read VALUE as degrees instead of radians')
def color(value: float, degrees: bool):
    """Print the wheel color at an angle."""
    radians = math.radians(value) if degrees else value
    result = angle_to_color(radians)
    logger.debug(f"angle {radians} -> {result}")
    click.echo(result.to_hex())


@click.command()
@click.argument('value', type=COLOR)
def angle(value: Color):
    """Print the wheel angle of a color (radians and degrees)."""
    radians = color_to_angle(value)
    click.echo(f"{radians:.6f} rad ({math.degrees(radians):.2f}°)")


@click.command()
@click.argument('channel', type=click.Choice(sorted(CHANNELS), case_sensitive=False))
@click.argument('position', type=float)
@click.option('--length', type=click.IntRange(min=1), default=240, show_default=True, help='Track length in pixels')
@click.option('--base', type=COLOR, default='#FFFF0000', show_default=True, help='Base color the bar edits')
@click.option('--min', 'minimum', type=float, default=None, help='Level at the start of the track')
@click.option('--max', 'maximum', type=float, default=None, help='Level at the end of the track')
def bar(channel: str, position: float, length: int, base: Color, minimum, maximum):
    """Print the level and color a bar gives at a pointer POSITION."""
    widget = ChannelBar(get_channel(channel.lower()), length=length, margin=0, minimum=minimum, maximum=maximum)
    widget.set_color(base)
    if not widget.press(position):
        # Off the track: pin to the nearest end
        widget.move(position)
    widget.release()

    level = widget.level
    level_text = f"{level}" if isinstance(level, int) else f"{level:.4f}"
    click.echo(f"{widget.channel.name}: {level_text}")
    click.echo(f"color: {widget.color.to_hex()}")


@click.command()
@click.option('--steps', type=click.IntRange(min=1), default=12, show_default=True, help='Number of samples')
def wheel(steps: int):
    """Print colors evenly spaced around the wheel, starting at angle 0."""
    words = to_argb_words(sample_wheel(steps))
    for index, word in enumerate(words):
        degrees = 360.0 * index / steps
        click.echo(f"{degrees:7.2f}°  #{int(word):08X}")
