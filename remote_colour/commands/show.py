"""Show the current colour and the remote it came from.

Prints the one-line status text plus its tooltip, the same summary an
editor status bar item shows, and whether .vscode/settings.json currently
holds exactly these colours (i.e. `apply` is up to date).

Example:
    uv run remote-colour show .
"""

from remote_colour.core.derive import colour_customizations
from remote_colour.core.report import status_text
from remote_colour.core.settings import current_customizations
from remote_colour.core.types import Command, Context, Report

command = Command(
    name='show',
    help='Show the current colour and remote as a status line.',
)


@command.run
def run(ctx: Context, report: Report, args) -> None:
    text, tooltip = status_text(ctx.state)
    applied = False
    if ctx.state.derived is not None:
        current = current_customizations(ctx.settings_path)
        wanted = colour_customizations(ctx.state.derived)
        applied = all(current.get(key) == value for key, value in wanted.items())
    report.add('show', {'text': text, 'tooltip': tooltip, 'applied': applied})
