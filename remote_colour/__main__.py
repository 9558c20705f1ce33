"""remote-colour — Give every repository its own consistent workspace colour.

Usage: uv run remote-colour <command> [workspace] [options]

The colour is derived from the workspace's git remote URL: the URL is
normalized (ssh/https spellings, case, trailing .git and / all collapse
to one form), hashed with FNV-1a and mapped onto the hue circle at a fixed
saturation and lightness. Accent colours are lightened/darkened shades of
that base, each paired with a foreground picked for contrast.

Commands are auto-discovered from remote_colour/commands/.
Each command module's docstring is its documentation.
Run `remote-colour help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, remote-colour looks for a .env file starting from
  the workspace and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
  Command-line options win over both.
"""

import argparse
import importlib
import os
import sys
from pathlib import Path

from remote_colour import registry
from remote_colour.core.config import ConfigError, load_config, load_env
from remote_colour.core.contrast import POLICIES
from remote_colour.core.derive import resolve_state
from remote_colour.core.git import remote_lookup
from remote_colour.core.palette import ParseError
from remote_colour.core.report import format_json, format_text
from remote_colour.core.settings import SettingsError
from remote_colour.core.types import ColourState, Context, Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'remote_colour.commands.{name}')


def _short_help(name: str, default: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else default


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  remote-colour derive .\n'
        '  remote-colour apply . --saturation 60 --lightness 35\n'
        '  remote-colour apply . -a statusBar=none -a titleBar=darken\n'
        "  remote-colour apply . --colour '#336699'\n"
        '  remote-colour derive . --text github.com/foo/bar --json\n'
        '  remote-colour check . --min-contrast 4.5\n'
        '  remote-colour swatch . --out swatch.png\n'
        '  remote-colour reset .\n'
        '  remote-colour help check\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  REMOTE_COLOUR_SATURATION, REMOTE_COLOUR_LIGHTNESS, REMOTE_COLOUR_AMOUNT\n'
        '  REMOTE_COLOUR_ACCENTS=statusBar=none,titleBar=darken\n'
        '  REMOTE_COLOUR_OVERRIDE=#rrggbb  REMOTE_COLOUR_IDENTITY=<text>\n'
        '  REMOTE_COLOUR_REMOTE=origin  REMOTE_COLOUR_POLICY=threshold|ratio\n'
        '  REMOTE_COLOUR_GIT_TIMEOUT=5\n'
    )
    parser = argparse.ArgumentParser(
        prog='remote-colour',
        description='Give every repository its own consistent workspace colour.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from workspace to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        p.add_argument('workspace', nargs='?', default='.', help='Workspace folder (default: .)')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-t', '--text', help='Literal identifying string instead of the git remote URL')
        p.add_argument('-c', '--colour', help='Manual base colour (#rrggbb); skips hashing')
        p.add_argument('-r', '--remote', help='Git remote name (default: origin)')
        p.add_argument('-s', '--saturation', type=int, help='HSL saturation 0-100 (default 50)')
        p.add_argument('-l', '--lightness', type=int, help='HSL lightness 0-100 (default 40)')
        p.add_argument(
            '-a',
            '--accent',
            action='append',
            default=None,
            metavar='NAME=DIRECTIVE',
            help='Accent element and none|lighten|darken (repeatable; default statusBar=none)',
        )
        p.add_argument('--amount', type=int, help='Lighten/darken percentage (default 15)')
        p.add_argument('--policy', choices=POLICIES, help='Foreground choice: threshold (default) or ratio')
        p.add_argument(
            '-m',
            '--min-contrast',
            type=float,
            default=None,
            metavar='N',
            help='Exit 1 if any accent pair contrast ratio is below N (check only, default 3.0)',
        )
        p.add_argument('-o', '--out', help='Output path for swatch PNG')

    # `help` subcommand — prints full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: remote-colour help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'topic', None))
        return

    if not os.path.isdir(args.workspace):
        print(f'Error: workspace not found: {args.workspace}', file=sys.stderr)
        sys.exit(1)
    workspace = Path(args.workspace)

    # Load .env before reading config — OS env vars always win
    env_path = load_env(start=workspace, env_file=args.env_file)
    if env_path:
        print(f'remote-colour: loaded {env_path}', file=sys.stderr)

    try:
        config = load_config(args)
        cmd = registry.get(args.command)
        if cmd.needs_state:
            state = resolve_state(str(workspace), config, remote_lookup(config.git_timeout))
        else:
            state = ColourState()
        report = Report.for_state(str(workspace), state)
        cmd.execute(Context(workspace=workspace, config=config, state=state), report, args)
    except (ConfigError, ParseError, SettingsError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    # Contrast gate — after output so the report is visible on failure
    if report.fail_count > 0:
        sys.exit(1)


if __name__ == '__main__':
    main()
