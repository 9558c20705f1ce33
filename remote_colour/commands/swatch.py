"""Render the derived colours to a PNG swatch.

One horizontal band for the base colour, then one band per accent filled
with its background and labelled in its chosen foreground. Handy for
eyeballing a saturation/lightness setting before applying it.

Writes to --out (default <workspace>/remote-colour.png).

Example:
    uv run remote-colour swatch . --out /tmp/swatch.png
    uv run remote-colour swatch . --text github.com/foo/bar -a titleBar=darken
"""

import os

from PIL import Image, ImageDraw, ImageFont

from remote_colour.core.contrast import contrast_foreground
from remote_colour.core.palette import hex_to_rgb
from remote_colour.core.types import ColourConfig, Command, Context, DerivedColours, Report

command = Command(
    name='swatch',
    help='Render base and accent colours to a PNG swatch.',
)

BAND_WIDTH = 480
BAND_HEIGHT = 48
PADDING = 12


def render_swatch(derived: DerivedColours, config: ColourConfig) -> Image.Image:
    """Draw one labelled band for the base colour and one per accent."""
    base_fg = contrast_foreground(
        derived.base, config.light_foreground, config.dark_foreground, policy=config.foreground_policy
    )
    bands = [('base', derived.base, base_fg)]
    bands += [(f'{a.name} ({a.adjustment.value})', a.background, a.foreground) for a in derived.accents]

    image = Image.new('RGB', (BAND_WIDTH, BAND_HEIGHT * len(bands)))
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()
    for i, (label, bg, fg) in enumerate(bands):
        top = i * BAND_HEIGHT
        draw.rectangle((0, top, BAND_WIDTH - 1, top + BAND_HEIGHT - 1), fill=hex_to_rgb(bg))
        draw.text((PADDING, top + PADDING), f'{label}  {bg}', fill=hex_to_rgb(fg), font=font)
    return image


@command.run
def run(ctx: Context, report: Report, args) -> None:
    derived = ctx.state.derived
    if derived is None:
        report.add('swatch', {'error': 'no colour to render'})
        return

    path = getattr(args, 'out', None) or str(ctx.workspace / 'remote-colour.png')
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)

    image = render_swatch(derived, ctx.config)
    image.save(path)
    report.add('swatch', {'file': path, 'width': image.width, 'height': image.height})
