"""Write the derived colours into <workspace>/.vscode/settings.json.

Merges into workbench.colorCustomizations. Keys this tool manages are
removed first so a changed accent list leaves nothing stale behind; every
other key in the file is preserved.

With no colour (no remote, no override, no --text) the managed keys are
cleared instead, exactly as `reset` does.

Example:
    uv run remote-colour apply .
    uv run remote-colour apply ~/src/project --colour '#336699'
"""

from remote_colour.core.derive import colour_customizations, managed_keys
from remote_colour.core.settings import apply_colours, reset_colours
from remote_colour.core.types import Command, Context, Report

command = Command(
    name='apply',
    help='Merge derived colours into .vscode/settings.json (clears them when there is no remote).',
)


@command.run
def run(ctx: Context, report: Report, args) -> None:
    path = ctx.settings_path
    managed = managed_keys(ctx.config)

    if ctx.state.derived is None:
        removed = reset_colours(path, managed)
        report.add('apply', {'action': 'cleared', 'settings': str(path), 'removed': removed})
        return

    colours = colour_customizations(ctx.state.derived)
    apply_colours(path, colours, managed)
    report.add('apply', {'action': 'applied', 'settings': str(path), 'colours': colours})
