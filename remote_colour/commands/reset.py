"""Remove every colour this tool manages from .vscode/settings.json.

Unrelated customizations stay. If workbench.colorCustomizations ends up
empty, the key is removed from the file entirely.

Example:
    uv run remote-colour reset .
"""

from remote_colour.core.derive import managed_keys
from remote_colour.core.settings import reset_colours
from remote_colour.core.types import Command, Context, Report

command = Command(
    name='reset',
    help='Remove managed colour customizations from workspace settings.',
    needs_state=False,
)


@command.run
def run(ctx: Context, report: Report, args) -> None:
    path = ctx.settings_path
    removed = reset_colours(path, managed_keys(ctx.config))
    report.add('reset', {'action': 'reset', 'settings': str(path), 'removed': removed})
