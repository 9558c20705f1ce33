"""Print the colours derived for a workspace without changing anything.

Resolves the identifying string (manual --colour override, literal --text,
or the git remote URL), hashes it onto the hue circle and prints the base
colour, each accent's background/foreground pair and the settings keys
that `apply` would write.

Example:
    uv run remote-colour derive .
    uv run remote-colour derive . --text github.com/foo/bar --json
    uv run remote-colour derive . -a statusBar=none -a titleBar=darken
"""

from remote_colour.core.derive import colour_customizations
from remote_colour.core.report import accent_rows
from remote_colour.core.types import Command, Context, Report

command = Command(
    name='derive',
    help='Print base colour, accent pairs and settings keys. Writes nothing.',
)


@command.run
def run(ctx: Context, report: Report, args) -> None:
    derived = ctx.state.derived
    if derived is None:
        report.add('derive', {'accents': [], 'colours': {}})
        return
    report.add(
        'derive',
        {
            'base': derived.base,
            'accents': accent_rows(derived),
            'colours': colour_customizations(derived),
        },
    )
